"""Voice models, ready-made voice styles, and language-based voice matching.

Responsibilities:
- Represent engine voice identities independently of any audio backend.
- Provide the voice cards and auto-voice styles offered to users.
- Pick the best engine voice for a language hint.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True, slots=True)
class VoiceInfo:
    """Engine voice advertised by a speech backend.

    Attributes:
        name: Engine-native voice name.
        language: BCP-47 language tag, e.g. `en-US`.
    """

    name: str
    language: str


@dataclass(frozen=True, slots=True)
class VoiceStyle:
    """Declarative tone/rate/emotion preset applied to the controls.

    Attributes:
        name: Preset identifier.
        tone: Base pitch control value.
        rate: Base rate control value.
        emotion: Emotion label selected with the preset.
    """

    name: str
    tone: float
    rate: float
    emotion: str


VOICE_CARDS: dict[str, VoiceStyle] = {
    "male": VoiceStyle("male", tone=0.8, rate=0.95, emotion="normal"),
    "female": VoiceStyle("female", tone=1.3, rate=1.05, emotion="friendly"),
    "neutral": VoiceStyle("neutral", tone=1.0, rate=1.0, emotion="normal"),
}

AUTO_VOICES: dict[str, VoiceStyle] = {
    "deep-male": VoiceStyle("deep-male", tone=0.85, rate=0.9, emotion="professional"),
    "clear-female": VoiceStyle("clear-female", tone=1.2, rate=1.05, emotion="friendly"),
    "energetic-host": VoiceStyle("energetic-host", tone=1.3, rate=1.2, emotion="energetic"),
    "narrator": VoiceStyle("narrator", tone=1.05, rate=0.95, emotion="storytelling"),
    "calm-assistant": VoiceStyle("calm-assistant", tone=0.95, rate=0.92, emotion="calm"),
}


def get_voice_style(name: str) -> VoiceStyle:
    """Return a voice card or auto-voice style by name.

    Raises:
        KeyError: If no style is registered under `name`.
    """

    if name in VOICE_CARDS:
        return VOICE_CARDS[name]
    if name in AUTO_VOICES:
        return AUTO_VOICES[name]
    known = ", ".join(sorted([*VOICE_CARDS, *AUTO_VOICES]))
    raise KeyError(f"Unknown voice style `{name}`; known: {known}.")


def select_voice(voices: Sequence[VoiceInfo], language: str) -> VoiceInfo | None:
    """Pick the engine voice that best matches `language`.

    Preference: exact tag match, then same primary subtag, then any English
    voice, then the first voice advertised.
    """

    if not voices:
        return None

    wanted = language.lower()
    for voice in voices:
        if voice.language and voice.language.lower() == wanted:
            return voice

    primary = wanted.split("-")[0]
    for voice in voices:
        if voice.language and voice.language.lower().startswith(primary):
            return voice

    for voice in voices:
        if "en" in voice.language:
            return voice
    return voices[0]
