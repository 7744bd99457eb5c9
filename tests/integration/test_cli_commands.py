"""CLI command tests for classification, speech, blending, and scoring output."""

from pathlib import Path

from typer.testing import CliRunner

from mytone.cli import app


def test_analyze_command_prints_label_and_scores() -> None:
    """Analyze should print the detected label and the ordered score vector."""

    runner = CliRunner()
    result = runner.invoke(app, ["analyze", "I am so happy and excited! great news"])

    assert result.exit_code == 0
    assert "Detected: happy" in result.output
    assert "Display: Happy" in result.output
    assert "Highlight: hl-happy" in result.output
    assert "  happy: 7.0" in result.output
    assert "  question: 0.0" in result.output


def test_speak_command_prints_finalized_request() -> None:
    """Speak should compose the emotion modifiers into the dispatched request."""

    runner = CliRunner()
    result = runner.invoke(app, ["speak", "hello world", "--emotion", "energetic"])

    assert result.exit_code == 0
    assert "Emotion: energetic" in result.output
    assert "Pitch: 1.3500" in result.output
    assert "Rate: 1.3000" in result.output
    assert "Volume: 1.0000" in result.output
    assert "stage=speak event=complete" in result.output


def test_speak_command_clamps_out_of_range_tone() -> None:
    """Speak should clamp raw control values before dispatch."""

    runner = CliRunner()
    result = runner.invoke(app, ["speak", "hello world", "--tone", "5", "--rate", "0.1"])

    assert result.exit_code == 0
    assert "Pitch: 2.0000" in result.output
    assert "Rate: 0.5000" in result.output


def test_speak_command_auto_detects_emotion() -> None:
    """Auto mode should use the classifier label when no emotion is given."""

    runner = CliRunner()
    result = runner.invoke(
        app, ["speak", "Once upon a time a long journey began for our hero", "--auto"]
    )

    assert result.exit_code == 0
    assert "Emotion: storytelling" in result.output
    assert "Pitch: 1.0500" in result.output


def test_speak_command_auto_emotion_from_config_can_be_disabled(tmp_path: Path) -> None:
    """`auto_emotion` from YAML applies unless `--no-auto` overrides it."""

    config_path = tmp_path / "mytone.yaml"
    config_path.write_text("auto_emotion: true\n", encoding="utf-8")
    text = "Once upon a time a long journey began for our hero"

    runner = CliRunner()
    detected = runner.invoke(app, ["speak", text, "--config", str(config_path)])
    disabled = runner.invoke(
        app, ["speak", text, "--config", str(config_path), "--no-auto"]
    )

    assert detected.exit_code == 0
    assert "Emotion: storytelling" in detected.output
    assert disabled.exit_code == 0
    assert "Emotion: normal" in disabled.output


def test_speak_command_preview_uses_config_budget(tmp_path: Path) -> None:
    """Preview mode should clip text to `preview_chars` from the config file."""

    config_path = tmp_path / "mytone.yaml"
    config_path.write_text("preview_chars: 5\nlanguage: en-GB\n", encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(
        app, ["speak", "abcdefghij", "--preview", "--config", str(config_path)]
    )

    assert result.exit_code == 0
    assert "Text: abcde\n" in result.output
    assert "Language: en-GB" in result.output


def test_blend_command_prints_blend_label_and_parameters() -> None:
    """Blend should print the audit label and clamped parameters."""

    runner = CliRunner()
    result = runner.invoke(
        app,
        ["blend", "--emotion-a", "happy", "--emotion-b", "sad", "--ratio", "0.5"],
    )

    assert result.exit_code == 0
    assert "Blend: happy+sad@50%" in result.output
    assert "Pitch: 1.0500" in result.output
    assert "Rate: 1.0000" in result.output


def test_similarity_command_reads_controls_from_config(tmp_path: Path) -> None:
    """Similarity should use YAML tone/emotion unless overridden on the CLI."""

    config_path = tmp_path / "mytone.yaml"
    config_path.write_text("tone: 1.3\nemotion: happy\n", encoding="utf-8")
    text = "x" * 160

    runner = CliRunner()
    from_config = runner.invoke(app, ["similarity", text, "--config", str(config_path)])
    overridden = runner.invoke(
        app, ["similarity", text, "--config", str(config_path), "--emotion", "sad"]
    )

    assert from_config.exit_code == 0
    assert "Similarity: 73%" in from_config.output
    assert "Tier: good" in from_config.output
    assert "Similarity: 66%" in overridden.output


def test_voices_templates_and_tune_commands() -> None:
    """Listing commands should print deterministic rows."""

    runner = CliRunner()
    voices = runner.invoke(app, ["voices"])
    templates = runner.invoke(app, ["templates"])
    narration = runner.invoke(app, ["templates", "narration"])
    tune = runner.invoke(app, ["tune", "50", "50"])

    assert "energetic-host: tone=1.30 rate=1.20 emotion=energetic" in voices.output
    assert templates.output.splitlines() == ["narration", "podcast", "presentation", "product"]
    assert "Detected: storytelling" in narration.output
    assert "Tone: 1.05" in tune.output
    assert "Rate: 1.05" in tune.output


def test_speak_command_auto_preview_clips_text() -> None:
    """Auto mode should still honor the preview character budget."""

    runner = CliRunner()
    result = runner.invoke(app, ["speak", "I am so happy! " * 20, "--auto", "--preview"])

    assert result.exit_code == 0
    assert "Emotion: happy" in result.output
    text_line = next(line for line in result.output.splitlines() if line.startswith("Text: "))
    assert len(text_line) - len("Text: ") == 120


def test_speak_command_voice_style_seeds_controls() -> None:
    """A voice style should seed tone, rate, and emotion before explicit options."""

    runner = CliRunner()
    styled = runner.invoke(app, ["speak", "Hello there", "--voice", "female"])
    overridden = runner.invoke(
        app,
        ["speak", "Hello there", "--voice", "female", "--tone", "1.0", "--emotion", "normal"],
    )

    assert styled.exit_code == 0
    assert "Emotion: friendly" in styled.output
    assert "Pitch: 1.4560" in styled.output
    assert "Rate: 1.081" in styled.output
    assert overridden.exit_code == 0
    assert "Emotion: normal" in overridden.output
    assert "Pitch: 1.0000" in overridden.output
    assert "Rate: 1.0500" in overridden.output


def test_similarity_command_voice_style_matches_explicit_controls() -> None:
    """Scoring with a voice style equals scoring with its tone and emotion."""

    text = "Once upon a time a long journey began for our hero"
    runner = CliRunner()
    styled = runner.invoke(app, ["similarity", text, "--voice", "narrator"])
    explicit = runner.invoke(
        app, ["similarity", text, "--tone", "1.05", "--emotion", "storytelling"]
    )

    assert styled.exit_code == 0
    assert styled.output == explicit.output


def test_speak_command_reads_environment_defaults(tmp_path: Path) -> None:
    """`MYTONE_*` variables apply below YAML values and CLI options."""

    env = {"MYTONE_TONE": "1.2", "MYTONE_LANGUAGE": "en-GB"}
    config_path = tmp_path / "mytone.yaml"
    config_path.write_text("tone: 0.9\n", encoding="utf-8")

    runner = CliRunner()
    from_env = runner.invoke(app, ["speak", "hello world"], env=env)
    from_yaml = runner.invoke(
        app, ["speak", "hello world", "--config", str(config_path)], env=env
    )
    from_cli = runner.invoke(
        app,
        ["speak", "hello world", "--config", str(config_path), "--tone", "1.1"],
        env=env,
    )

    assert from_env.exit_code == 0
    assert "Pitch: 1.2000" in from_env.output
    assert "Language: en-GB" in from_env.output
    assert "Pitch: 0.9000" in from_yaml.output
    assert "Language: en-GB" in from_yaml.output
    assert "Pitch: 1.1000" in from_cli.output
