"""Static emotion parameter tables.

`MODIFIER_TABLE` holds relative factors applied on top of caller-chosen
parameters for direct speech. `BASE_VALUE_TABLE` holds absolute pitch/rate
anchors interpolated by the blend engine. They use different vocabularies and
value semantics.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True, slots=True)
class EmotionModifier:
    """Multiplicative modifier for one emotion label.

    Attributes:
        pitch_factor: Factor applied to the base pitch.
        rate_factor: Factor applied to the base rate.
        volume_override: Fixed volume, or `None` to keep the base volume.
    """

    pitch_factor: float = 1.0
    rate_factor: float = 1.0
    volume_override: float | None = None


@dataclass(frozen=True, slots=True)
class EmotionBaseValues:
    """Absolute pitch/rate anchor for one emotion label."""

    pitch: float = 1.0
    rate: float = 1.0


IDENTITY_MODIFIER = EmotionModifier()
NEUTRAL_BASE_VALUES = EmotionBaseValues()

MODIFIER_TABLE: Mapping[str, EmotionModifier] = MappingProxyType(
    {
        "happy": EmotionModifier(1.25, 1.15, 1.0),
        "sad": EmotionModifier(0.85, 0.90, 0.9),
        "friendly": EmotionModifier(1.12, 1.03, 1.0),
        "soft": EmotionModifier(0.95, 0.90, 0.82),
        "energetic": EmotionModifier(1.35, 1.30, 1.0),
        "calm": EmotionModifier(0.90, 0.92, 0.95),
        "professional": EmotionModifier(0.98, 1.00, 1.0),
        "storytelling": EmotionModifier(1.05, 0.93, 0.98),
    }
)

BASE_VALUE_TABLE: Mapping[str, EmotionBaseValues] = MappingProxyType(
    {
        "happy": EmotionBaseValues(1.25, 1.1),
        "sad": EmotionBaseValues(0.85, 0.9),
        "friendly": EmotionBaseValues(1.15, 1.0),
        "soft": EmotionBaseValues(0.95, 0.9),
        "energetic": EmotionBaseValues(1.35, 1.25),
        "calm": EmotionBaseValues(0.9, 0.92),
        "normal": NEUTRAL_BASE_VALUES,
    }
)


def modifier_for(label: str) -> EmotionModifier:
    """Return the modifier for `label`, identity for unknown labels."""

    return MODIFIER_TABLE.get(label, IDENTITY_MODIFIER)


def base_values_for(label: str) -> EmotionBaseValues:
    """Return blend base values for `label`, `normal` values for unknown labels."""

    return BASE_VALUE_TABLE.get(label, NEUTRAL_BASE_VALUES)
