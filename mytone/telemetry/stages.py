"""Stage telemetry helpers.

Responsibilities:
- Wrap named actions with start/complete/failure run-log events.
- Keep telemetry optional so pure callers can skip logging entirely.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from .logger import RunLogger

_StageResult = TypeVar("_StageResult")

STAGE_SEQUENCE = ("classify", "blend", "score", "speak")


def run_stage(
    run_logger: RunLogger | None,
    stage_name: str,
    action: Callable[[], _StageResult],
    **context: object,
) -> _StageResult:
    """Run one named stage and emit start/complete/failure telemetry events.

    `context` is attached to the completion event only.

    Raises:
        ValueError: If `stage_name` is not in `STAGE_SEQUENCE`.
    """

    if stage_name not in STAGE_SEQUENCE:
        raise ValueError(f"Unknown stage `{stage_name}`.")
    if run_logger is not None:
        run_logger.log_stage_start(stage_name)
    try:
        result = action()
    except Exception as exc:
        if run_logger is not None:
            run_logger.log_stage_failure(stage_name, type(exc).__name__)
        raise
    if run_logger is not None:
        run_logger.log_stage_complete(stage_name, **context)
    return result
