"""Command-line interface for MyTone.

Responsibilities:
- Expose user-facing commands for classification, speech, blending, and scoring.
- Convert CLI arguments, voice styles, YAML files, and `MYTONE_*` variables
  into `MyToneConfig`.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import (
    echo_score_vector,
    echo_similarity,
    echo_speech_request,
    echo_voice_styles,
    exit_with_command_error,
)
from .config import ConfigLoader, MyToneConfig
from .emotion.blend import blend
from .emotion.classifier import classify, score_text
from .emotion.display import display_label, highlight_class, suggestion_text
from .emotion.similarity import score
from .errors import StageError
from .telemetry.logger import RunLogger
from .telemetry.stages import run_stage
from .text.templates import TEMPLATES, get_template
from .tts.engine import RecordingSpeechEngine
from .tts.speaker import Speaker
from .tts.voices import AUTO_VOICES, VOICE_CARDS, get_voice_style
from .tuner import tuner_position_to_settings

app = typer.Typer(
    name="mytone",
    no_args_is_help=True,
    help="MyTone CLI.",
)

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML config file with control defaults."),
]
ToneOption = Annotated[
    float | None, typer.Option("--tone", help="Base pitch control value.")
]
RateOption = Annotated[
    float | None, typer.Option("--rate", help="Base rate control value.")
]
EmotionOption = Annotated[
    str | None, typer.Option("--emotion", help="Emotion label override.")
]
VoiceOption = Annotated[
    str | None,
    typer.Option("--voice", help="Named voice style that seeds the base controls."),
]


def _load_env_config() -> MyToneConfig:
    """Load `MYTONE_*` environment defaults and map failures to stage errors."""

    try:
        return ConfigLoader.from_env()
    except ValueError as exc:
        raise StageError(
            stage="config",
            detail=f"Invalid environment config: {exc}",
            hint="Fix or unset the offending `MYTONE_*` variables and rerun.",
        ) from exc


def _load_yaml_config(config_path: Path | None, base: MyToneConfig) -> MyToneConfig:
    """Layer a YAML config file over `base` and map failures to stage errors."""

    if config_path is None:
        return base

    try:
        return ConfigLoader.from_yaml(config_path, base=base)
    except FileNotFoundError as exc:
        raise StageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise StageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc


def _apply_voice_style(config: MyToneConfig, voice: str | None) -> MyToneConfig:
    """Seed the base controls from a named voice style."""

    if voice is None:
        return config

    try:
        style = get_voice_style(voice)
    except KeyError as exc:
        raise StageError(
            stage="config",
            detail=str(exc.args[0]),
            hint="Run `mytone voices` to list available styles.",
        ) from exc
    return replace(config, tone=style.tone, rate=style.rate, emotion=style.emotion)


def _resolve_config(
    config_file: Path | None, voice: str | None = None, **overrides: object
) -> MyToneConfig:
    """Resolve effective controls.

    Precedence: CLI options, then the `--voice` style, then YAML values, then
    `MYTONE_*` environment values, then defaults.
    """

    base = _load_yaml_config(config_file, _load_env_config())
    styled = _apply_voice_style(base, voice)
    explicit = {key: value for key, value in overrides.items() if value is not None}
    return replace(styled, **explicit)


@app.command("analyze")
def analyze_command(
    text: Annotated[str, typer.Argument(help="Text to classify.")],
) -> None:
    """Classify text and print the per-category score vector."""

    try:
        run_logger = RunLogger()
        label = run_stage(run_logger, "classify", lambda: classify(text))
    except Exception as exc:
        exit_with_command_error("analyze", exc)

    typer.echo(f"Detected: {label}")
    typer.echo(f"Display: {display_label(label)}")
    typer.echo(f"Suggestion: {suggestion_text(label)}")
    typer.echo(f"Highlight: {highlight_class(label) or 'none'}")
    typer.echo("Scores:")
    echo_score_vector(score_text(text))


@app.command("speak")
def speak_command(
    text: Annotated[str, typer.Argument(help="Text to speak.")],
    tone: ToneOption = None,
    rate: RateOption = None,
    emotion: EmotionOption = None,
    language: Annotated[
        str | None, typer.Option("--language", help="Language hint, e.g. `en-US`.")
    ] = None,
    voice: VoiceOption = None,
    config_file: ConfigOption = None,
    auto: Annotated[
        bool | None,
        typer.Option(
            "--auto/--no-auto",
            help="Use the detected emotion when `--emotion` is omitted.",
        ),
    ] = None,
    preview: Annotated[
        bool,
        typer.Option("--preview", help="Speak only the first `preview_chars` characters."),
    ] = False,
) -> None:
    """Build a finalized speech request and dispatch it to the dry-run engine."""

    try:
        config = _resolve_config(
            config_file,
            voice=voice,
            tone=tone,
            rate=rate,
            emotion=emotion,
            language=language,
            auto_emotion=auto,
        )
        run_logger = RunLogger()
        chosen = config.emotion
        if config.auto_emotion and emotion is None:
            chosen = run_stage(run_logger, "classify", lambda: classify(text))
        speaker = Speaker(RecordingSpeechEngine(), run_logger=run_logger)
        if preview:
            request = speaker.preview(
                text,
                tone=config.tone,
                rate=config.rate,
                emotion=chosen,
                language=config.language,
                limit=config.preview_chars,
            )
        else:
            request = speaker.speak(
                text,
                tone=config.tone,
                rate=config.rate,
                emotion=chosen,
                language=config.language,
            )
    except Exception as exc:
        exit_with_command_error("speak", exc)

    echo_speech_request(request)


@app.command("blend")
def blend_command(
    emotion_a: Annotated[
        str | None, typer.Option("--emotion-a", help="Profile used at ratio 0.")
    ] = None,
    emotion_b: Annotated[
        str | None, typer.Option("--emotion-b", help="Profile used at ratio 1.")
    ] = None,
    ratio: Annotated[
        float | None, typer.Option("--ratio", help="Blend ratio in `[0, 1]`.")
    ] = None,
    warmth: Annotated[
        float | None, typer.Option("--warmth", help="Pitch multiplier after blending.")
    ] = None,
    clarity: Annotated[
        float | None, typer.Option("--clarity", help="Rate multiplier after blending.")
    ] = None,
    config_file: ConfigOption = None,
) -> None:
    """Blend two emotion profiles and print the clamped parameters."""

    try:
        config = _resolve_config(
            config_file,
            blend_emotion_a=emotion_a,
            blend_emotion_b=emotion_b,
            blend_ratio=ratio,
            warmth=warmth,
            clarity=clarity,
        )
        result = run_stage(RunLogger(), "blend", lambda: blend(config.blend_config()))
    except Exception as exc:
        exit_with_command_error("blend", exc)

    parameters = result.to_parameters()
    typer.echo(f"Blend: {result.label}")
    typer.echo(f"Pitch: {parameters.pitch:.4f}")
    typer.echo(f"Rate: {parameters.rate:.4f}")


@app.command("similarity")
def similarity_command(
    text: Annotated[str, typer.Argument(help="Text to score.")],
    tone: ToneOption = None,
    emotion: EmotionOption = None,
    config_file: ConfigOption = None,
    voice: VoiceOption = None,
) -> None:
    """Score a text and voice configuration with the similarity heuristic."""

    try:
        config = _resolve_config(config_file, voice=voice, tone=tone, emotion=emotion)
        result = run_stage(
            RunLogger(), "score", lambda: score(config.similarity_input(text))
        )
    except Exception as exc:
        exit_with_command_error("similarity", exc)

    echo_similarity(result)


@app.command("voices")
def voices_command() -> None:
    """List voice cards and auto-voice styles."""

    echo_voice_styles("Voice cards", VOICE_CARDS)
    echo_voice_styles("Auto voices", AUTO_VOICES)


@app.command("templates")
def templates_command(
    name: Annotated[
        str | None, typer.Argument(help="Template to print; omit to list names.")
    ] = None,
) -> None:
    """List starter templates or print one with its detected emotion."""

    if name is None:
        for template_name in sorted(TEMPLATES):
            typer.echo(template_name)
        return

    try:
        text = get_template(name)
    except KeyError as exc:
        exit_with_command_error(
            "templates",
            StageError(
                stage="templates",
                detail=str(exc.args[0]),
                hint="Run `mytone templates` to list available names.",
            ),
        )

    typer.echo(text)
    typer.echo(f"Detected: {classify(text)}")


@app.command("tune")
def tune_command(
    x: Annotated[float, typer.Argument(help="Pointer x offset inside the tuner box.")],
    y: Annotated[float, typer.Argument(help="Pointer y offset inside the tuner box.")],
    width: Annotated[float, typer.Option("--width", help="Tuner box width.")] = 100.0,
    height: Annotated[float, typer.Option("--height", help="Tuner box height.")] = 100.0,
) -> None:
    """Map a tuner-graph position to tone and rate values."""

    try:
        tone, rate = tuner_position_to_settings(x, y, width, height)
    except ValueError as exc:
        exit_with_command_error("tune", exc)

    typer.echo(f"Tone: {tone:.2f}")
    typer.echo(f"Rate: {rate:.2f}")


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
