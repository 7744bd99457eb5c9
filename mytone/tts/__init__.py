"""Speech dispatch abstractions.

This package contains the speech engine protocol, voice models and presets,
and the `Speaker` that finalizes requests before dispatch.
"""

from .engine import RecordingSpeechEngine, SpeechEngine
from .speaker import Speaker
from .voices import (
    AUTO_VOICES,
    VOICE_CARDS,
    VoiceInfo,
    VoiceStyle,
    get_voice_style,
    select_voice,
)

__all__ = [
    "AUTO_VOICES",
    "VOICE_CARDS",
    "RecordingSpeechEngine",
    "SpeechEngine",
    "Speaker",
    "VoiceInfo",
    "VoiceStyle",
    "get_voice_style",
    "select_voice",
]
