"""Domain exceptions for command and speech dispatch diagnostics."""

from __future__ import annotations


class StageError(RuntimeError):
    """Raised when a named command stage cannot proceed."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class SpeechEngineError(RuntimeError):
    """Raised by speech engines that fail to render an utterance."""
