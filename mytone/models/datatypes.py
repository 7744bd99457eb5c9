"""Core datatypes shared across MyTone modules.

Responsibilities:
- Represent immutable records exchanged between the scoring core and its callers.
- Hold the closed emotion vocabulary and the global synthesis parameter ranges.

Key types:
- `UtteranceParameters`, `BlendConfig`, `BlendResult`, `SimilarityInput`,
  `SimilarityScore`, and `SpeechRequest`.
"""

from __future__ import annotations

from dataclasses import dataclass


EMOTION_LABELS: tuple[str, ...] = (
    "happy",
    "sad",
    "angry",
    "professional",
    "soft",
    "storytelling",
    "questioning",
    "friendly",
    "energetic",
    "calm",
    "normal",
)
DEFAULT_EMOTION = "normal"

PITCH_RANGE = (0.1, 2.0)
RATE_RANGE = (0.5, 2.0)
VOLUME_RANGE = (0.0, 1.0)


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp `value` into the inclusive `[lower, upper]` interval."""

    return max(lower, min(upper, value))


@dataclass(frozen=True, slots=True)
class UtteranceParameters:
    """Numeric synthesis parameters for one utterance.

    Attributes:
        pitch: Relative voice height, `[0.1, 2.0]` once finalized.
        rate: Relative speaking speed, `[0.5, 2.0]` once finalized.
        volume: Loudness, `[0, 1]` once finalized.
    """

    pitch: float = 1.0
    rate: float = 1.0
    volume: float = 1.0

    def clamped(self) -> UtteranceParameters:
        """Return a copy with every field clamped to its global range."""

        return UtteranceParameters(
            pitch=clamp(self.pitch, *PITCH_RANGE),
            rate=clamp(self.rate, *RATE_RANGE),
            volume=clamp(self.volume, *VOLUME_RANGE),
        )


@dataclass(frozen=True, slots=True)
class BlendConfig:
    """Two-profile blend request.

    Attributes:
        label_a: Emotion used at ratio 0.
        label_b: Emotion used at ratio 1.
        ratio: Interpolation weight towards `label_b`.
        warmth: Multiplier applied to the blended pitch.
        clarity: Multiplier applied to the blended rate.
    """

    label_a: str
    label_b: str
    ratio: float = 0.5
    warmth: float = 1.0
    clarity: float = 1.0


@dataclass(frozen=True, slots=True)
class BlendResult:
    """Blended pitch/rate pair with a descriptive audit label."""

    pitch: float
    rate: float
    label: str

    def to_parameters(self) -> UtteranceParameters:
        """Return clamped utterance parameters ready for dispatch."""

        return UtteranceParameters(pitch=self.pitch, rate=self.rate, volume=1.0).clamped()


@dataclass(frozen=True, slots=True)
class SimilarityInput:
    """Text and configuration pair evaluated by the similarity heuristic."""

    text: str
    tone: float = 1.0
    emotion: str = DEFAULT_EMOTION


@dataclass(frozen=True, slots=True)
class SimilarityScore:
    """Similarity heuristic result.

    Attributes:
        value: Integral score in `[0, 100]`.
        tier: One of `great`, `good`, or `weak`.
        tip: Short human-readable guidance for the tier.
    """

    value: int
    tier: str
    tip: str


@dataclass(frozen=True, slots=True)
class SpeechRequest:
    """Finalized utterance handed to an external speech engine.

    Attributes:
        text: Text to speak.
        pitch: Clamped pitch.
        rate: Clamped rate.
        volume: Clamped volume.
        language: Language hint such as `en-US`.
        voice: Optional engine voice name picked for the language.
        emotion: Emotion label the parameters were composed from.
    """

    text: str
    pitch: float
    rate: float
    volume: float
    language: str
    voice: str | None = None
    emotion: str = DEFAULT_EMOTION

    @property
    def parameters(self) -> UtteranceParameters:
        """Return the numeric parameter triple of this request."""

        return UtteranceParameters(pitch=self.pitch, rate=self.rate, volume=self.volume)
