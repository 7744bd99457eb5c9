"""Speech engine interface and an in-memory recording implementation.

Responsibilities:
- Define the protocol the speech layer dispatches finalized requests to.
- Provide a dry-run engine for the CLI and tests.
"""

from __future__ import annotations

from typing import Protocol

from ..errors import SpeechEngineError
from ..models.datatypes import SpeechRequest


class SpeechEngine(Protocol):
    """Protocol for audio backends that render speech requests."""

    def speak(self, request: SpeechRequest) -> None:
        """Render one finalized speech request."""

    def cancel(self) -> None:
        """Stop any utterance currently being rendered."""


class RecordingSpeechEngine:
    """Speech engine that records requests instead of producing audio."""

    def __init__(self, fail_with: str | None = None) -> None:
        """Initialize the recorder, optionally failing every request with `fail_with`."""

        self.requests: list[SpeechRequest] = []
        self.cancel_count = 0
        self._fail_with = fail_with

    def speak(self, request: SpeechRequest) -> None:
        """Record `request`, or raise the configured engine failure."""

        if self._fail_with is not None:
            raise SpeechEngineError(self._fail_with)
        self.requests.append(request)

    def cancel(self) -> None:
        """Count cancellation calls."""

        self.cancel_count += 1

    @property
    def last_request(self) -> SpeechRequest | None:
        """Return the most recent recorded request, if any."""

        return self.requests[-1] if self.requests else None
