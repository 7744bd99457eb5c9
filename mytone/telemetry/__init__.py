"""Telemetry and observability helpers.

This package emits deterministic run events for auditing CLI activity.
"""

from .logger import RunLogger
from .stages import STAGE_SEQUENCE, run_stage

__all__ = ["RunLogger", "STAGE_SEQUENCE", "run_stage"]
