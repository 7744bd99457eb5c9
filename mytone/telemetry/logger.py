"""Structured run logging for MyTone commands.

Every line has the form `[phase] level=... stage=... event=... key=value`.
Records are bound to the `mytone` channel so the sink only receives MyTone
events, even when other code logs through the shared `loguru` logger.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from loguru import logger as _loguru_logger

if TYPE_CHECKING:
    from ..models.datatypes import SpeechRequest

_CHANNEL = "mytone"
_SAFE_PUNCTUATION = frozenset({"-", "_", ".", ":", "/", "+", "@", "%"})


def _token(value: object) -> str:
    """Render one context value as a shell-safe token."""

    if value is None:
        return "none"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return f"{value:.4f}"
    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(ch if ch.isalnum() or ch in _SAFE_PUNCTUATION else "_" for ch in raw)


def _is_mytone_record(record: dict) -> bool:
    return record["extra"].get("channel") == _CHANNEL


class RunLogger:
    """Emit deterministic stage and dispatch events for one command run."""

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        """Route `mytone` channel records to `sink` (stderr by default)."""

        self._sink = sink or sys.stderr
        _loguru_logger.remove()
        _loguru_logger.add(
            self._sink,
            format="{message}",
            level=level,
            colorize=False,
            filter=_is_mytone_record,
        )
        self._logger = _loguru_logger.bind(channel=_CHANNEL)

    def _emit(self, level: str, stage: str, event: str, context: dict[str, object]) -> None:
        pairs = "".join(f" {key}={_token(context[key])}" for key in sorted(context))
        self._logger.log(level, f"[phase] level={level} stage={stage} event={event}{pairs}")

    def log_stage_start(self, stage: str, **context: object) -> None:
        self._emit("INFO", stage, "start", context)

    def log_stage_complete(self, stage: str, **context: object) -> None:
        self._emit("INFO", stage, "complete", context)

    def log_stage_failure(self, stage: str, error_type: str) -> None:
        """Emit a failure event carrying only the exception type name."""

        self._emit("ERROR", stage, "failure", {"error_type": error_type})

    def log_speech_request(self, request: SpeechRequest) -> None:
        """Emit the finalized controls of a request handed to the engine.

        The text itself is summarized by its length.
        """

        self._emit(
            "INFO",
            "speak",
            "dispatch",
            {
                "chars": len(request.text),
                "emotion": request.emotion,
                "language": request.language,
                "pitch": request.pitch,
                "rate": request.rate,
                "voice": request.voice,
                "volume": request.volume,
            },
        )
