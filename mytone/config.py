"""Configuration model and loaders for MyTone.

Responsibilities:
- Define voice control defaults as a typed dataclass.
- Provide loader entry points for YAML- and environment-based configuration.

Key types:
- `MyToneConfig`: normalized control values for one command invocation.
- `ConfigLoader`: static construction helpers for `MyToneConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .models.datatypes import DEFAULT_EMOTION, BlendConfig, SimilarityInput
from .parsing import (
    normalize_optional_string,
    parse_optional_float,
    parse_required_boolean,
)


_DEFAULT_LANGUAGE = "en-US"
_DEFAULT_BLEND_EMOTION_A = "happy"
_DEFAULT_BLEND_EMOTION_B = "calm"
_DEFAULT_PREVIEW_CHARS = 120


@dataclass(slots=True)
class MyToneConfig:
    """Voice control values for one command invocation.

    Attributes:
        language: Language hint handed to the speech engine.
        tone: Base pitch control value.
        rate: Base rate control value.
        emotion: Selected emotion label for direct speech.
        blend_emotion_a: Blend profile used at ratio 0.
        blend_emotion_b: Blend profile used at ratio 1.
        blend_ratio: Interpolation weight towards `blend_emotion_b`.
        warmth: Blend pitch multiplier.
        clarity: Blend rate multiplier.
        preview_chars: Character budget of quick previews.
        auto_emotion: Whether speech uses the detected emotion by default.
    """

    language: str = _DEFAULT_LANGUAGE
    tone: float = 1.0
    rate: float = 1.0
    emotion: str = DEFAULT_EMOTION
    blend_emotion_a: str = _DEFAULT_BLEND_EMOTION_A
    blend_emotion_b: str = _DEFAULT_BLEND_EMOTION_B
    blend_ratio: float = 0.5
    warmth: float = 1.0
    clarity: float = 1.0
    preview_chars: int = _DEFAULT_PREVIEW_CHARS
    auto_emotion: bool = False

    def validate(self) -> None:
        """Validate configuration values that the scoring core does not clamp."""

        if not isinstance(self.language, str) or not self.language.strip():
            raise ValueError("`language` must be a non-empty string.")
        if not isinstance(self.emotion, str) or not self.emotion.strip():
            raise ValueError("`emotion` must be a non-empty string.")
        if self.preview_chars <= 0:
            raise ValueError("`preview_chars` must be a positive integer.")

    def blend_config(self) -> BlendConfig:
        """Return the blend request described by this config."""

        return BlendConfig(
            label_a=self.blend_emotion_a,
            label_b=self.blend_emotion_b,
            ratio=self.blend_ratio,
            warmth=self.warmth,
            clarity=self.clarity,
        )

    def similarity_input(self, text: str) -> SimilarityInput:
        """Return the similarity input for `text` under the current controls."""

        return SimilarityInput(text=text, tone=self.tone, emotion=self.emotion)


class ConfigLoader:
    """Factory methods for creating `MyToneConfig` from external sources."""

    _STRING_KEYS = ("language", "emotion", "blend_emotion_a", "blend_emotion_b")
    _FLOAT_KEYS = ("tone", "rate", "blend_ratio", "warmth", "clarity")
    _SUPPORTED_YAML_KEYS = frozenset(
        {*_STRING_KEYS, *_FLOAT_KEYS, "preview_chars", "auto_emotion"}
    )
    _ENV_KEYS = (*_STRING_KEYS, *_FLOAT_KEYS, "preview_chars", "auto_emotion")

    @staticmethod
    def from_yaml(path: Path, base: MyToneConfig | None = None) -> MyToneConfig:
        """Create a validated config from a YAML file.

        Keys missing from the file keep their values from `base`.
        """

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)

        return ConfigLoader._build_config_from_mapping(
            payload, source_label=f"YAML `{path}`", base=base
        )

    @staticmethod
    def from_env(
        env: Mapping[str, str] | None = None, base: MyToneConfig | None = None
    ) -> MyToneConfig:
        """Create a validated config from `MYTONE_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        payload: dict[str, Any] = {}
        for key in ConfigLoader._ENV_KEYS:
            env_key = f"MYTONE_{key.upper()}"
            if env_key not in env_map:
                continue
            value = normalize_optional_string(env_map.get(env_key))
            if value is not None:
                payload[key] = value

        return ConfigLoader._build_config_from_mapping(
            payload, source_label="Environment", base=base
        )

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], source_label: str, base: MyToneConfig | None = None
    ) -> MyToneConfig:
        """Build a validated config from a normalized mapping payload."""

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            key_list = ", ".join(str(key) for key in unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        defaults = base if base is not None else MyToneConfig()
        values: dict[str, Any] = {}
        for key in ConfigLoader._STRING_KEYS:
            values[key] = (
                ConfigLoader._optional_non_empty_string(payload, key) or getattr(defaults, key)
            )
        for key in ConfigLoader._FLOAT_KEYS:
            values[key] = ConfigLoader._optional_float(
                payload, key, source_label, default=getattr(defaults, key)
            )

        config = MyToneConfig(
            preview_chars=ConfigLoader._optional_positive_int(
                payload, "preview_chars", source_label, default=defaults.preview_chars
            ),
            auto_emotion=ConfigLoader._optional_boolean(
                payload, "auto_emotion", source_label, default=defaults.auto_emotion
            ),
            **values,
        )
        config.validate()
        return config

    @staticmethod
    def _optional_non_empty_string(payload: Mapping[str, Any], key: str) -> str | None:
        """Read an optional string field and normalize blank values to `None`."""

        if key not in payload:
            return None
        return normalize_optional_string(payload[key])

    @staticmethod
    def _optional_float(
        payload: Mapping[str, Any], key: str, source_label: str, default: float
    ) -> float:
        """Read and validate a numeric payload field."""

        if key not in payload or normalize_optional_string(payload[key]) is None:
            return default
        parsed = parse_optional_float(payload[key])
        if parsed is None:
            raise ValueError(f"{source_label} field `{key}` must be a number.")
        return parsed

    @staticmethod
    def _optional_positive_int(
        payload: Mapping[str, Any], key: str, source_label: str, default: int
    ) -> int:
        """Read and validate a positive integer payload field."""

        if key not in payload:
            return default

        raw_value = payload[key]
        if isinstance(raw_value, bool):
            raise ValueError(f"{source_label} field `{key}` must be a positive integer.")
        if isinstance(raw_value, int):
            parsed = raw_value
        else:
            normalized = normalize_optional_string(raw_value)
            if normalized is None:
                return default
            try:
                parsed = int(normalized)
            except ValueError as exc:
                raise ValueError(
                    f"{source_label} field `{key}` must be a positive integer."
                ) from exc

        if parsed <= 0:
            raise ValueError(f"{source_label} field `{key}` must be a positive integer.")
        return parsed

    @staticmethod
    def _optional_boolean(
        payload: Mapping[str, Any], key: str, source_label: str, default: bool
    ) -> bool:
        """Read and validate a boolean field from a payload."""

        if key not in payload:
            return default

        raw_value = payload[key]
        if isinstance(raw_value, bool):
            return raw_value
        normalized = normalize_optional_string(raw_value)
        if normalized is None:
            return default
        try:
            return parse_required_boolean(normalized, key)
        except ValueError as exc:
            raise ValueError(f"{source_label} field {exc}") from exc

