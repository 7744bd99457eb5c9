"""Unit tests for CLI output and error rendering helpers."""

from __future__ import annotations

import pytest
import typer

from mytone.cli_rendering import echo_speech_request, exit_with_command_error
from mytone.errors import StageError
from mytone.models.datatypes import SpeechRequest


def test_exit_with_command_error_renders_stage_error_with_hint(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print stage diagnostics and hint before exiting with code 1."""

    error = StageError(
        stage="config",
        detail="Config file not found: `missing.yaml`.",
        hint="Provide an existing path via `--config <path.yaml>`.",
    )

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("speak", error)

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "speak failed at stage `config`" in captured.err
    assert "Hint: Provide an existing path via `--config <path.yaml>`." in captured.err


def test_exit_with_command_error_renders_non_stage_fallback(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print fallback exception text for non-stage failures."""

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("tune", ValueError("box has no area"))

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "tune failed: box has no area" in captured.err


def test_echo_speech_request_prints_engine_default_voice(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Requests without a voice should say the engine default is used."""

    echo_speech_request(
        SpeechRequest(text="hi", pitch=1.0, rate=1.0, volume=1.0, language="en-US")
    )

    captured = capsys.readouterr()
    assert "Voice: (engine default)" in captured.out
    assert "Pitch: 1.0000" in captured.out
