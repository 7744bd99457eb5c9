"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
speech requests, score vectors, and voice style tables.
"""

from __future__ import annotations

from typing import Mapping, NoReturn

import typer

from .errors import StageError
from .models.datatypes import SimilarityScore, SpeechRequest
from .tts.voices import VoiceStyle


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, StageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_speech_request(request: SpeechRequest) -> None:
    """Print the finalized request handed to the speech engine."""

    typer.echo(f"Emotion: {request.emotion}")
    typer.echo(f"Pitch: {request.pitch:.4f}")
    typer.echo(f"Rate: {request.rate:.4f}")
    typer.echo(f"Volume: {request.volume:.4f}")
    typer.echo(f"Language: {request.language}")
    typer.echo(f"Voice: {request.voice or '(engine default)'}")
    typer.echo(f"Text: {request.text}")


def echo_score_vector(scores: Mapping[str, float]) -> None:
    """Print per-category classifier scores in declaration order."""

    for category, value in scores.items():
        typer.echo(f"  {category}: {value:.1f}")


def echo_similarity(result: SimilarityScore) -> None:
    """Print similarity score, tier, and tip."""

    typer.echo(f"Similarity: {result.value}%")
    typer.echo(f"Tier: {result.tier}")
    typer.echo(f"Tip: {result.tip}")


def echo_voice_styles(title: str, styles: Mapping[str, VoiceStyle]) -> None:
    """Print a deterministic table of voice styles."""

    typer.echo(f"{title}:")
    for name in sorted(styles):
        style = styles[name]
        typer.echo(
            f"  {name}: tone={style.tone:.2f} rate={style.rate:.2f} emotion={style.emotion}"
        )
