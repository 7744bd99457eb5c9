"""Shared pytest fixtures for the full MyTone test suite."""

from __future__ import annotations

import io

import pytest

from mytone.telemetry.logger import RunLogger
from mytone.tts.engine import RecordingSpeechEngine
from mytone.tts.speaker import Speaker
from mytone.tts.voices import VoiceInfo


@pytest.fixture
def recording_engine() -> RecordingSpeechEngine:
    """Provide a speech engine that records requests instead of producing audio."""

    return RecordingSpeechEngine()


@pytest.fixture
def engine_voices() -> tuple[VoiceInfo, ...]:
    """Provide a small deterministic voice list advertised by an engine."""

    return (
        VoiceInfo(name="Hedda", language="de-DE"),
        VoiceInfo(name="Sam", language="en-GB"),
        VoiceInfo(name="Ava", language="en-US"),
    )


@pytest.fixture
def log_buffer() -> io.StringIO:
    """Provide an in-memory sink for run-log assertions."""

    return io.StringIO()


@pytest.fixture
def speaker(
    recording_engine: RecordingSpeechEngine,
    engine_voices: tuple[VoiceInfo, ...],
    log_buffer: io.StringIO,
) -> Speaker:
    """Provide a speaker wired to the recording engine and an in-memory run log."""

    return Speaker(recording_engine, voices=engine_voices, run_logger=RunLogger(sink=log_buffer))
