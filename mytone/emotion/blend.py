"""Two-profile emotion blend engine.

Linearly interpolates the absolute base values of two emotion labels and
rescales the result by warmth (pitch) and clarity (rate).
"""

from __future__ import annotations

from ..models.datatypes import BlendConfig, BlendResult, clamp
from ..parsing import round_half_up
from .tables import base_values_for

RATIO_RANGE = (0.0, 1.0)
MODULATION_RANGE = (0.1, 2.0)


def blend_label(label_a: str, label_b: str, ratio: float) -> str:
    """Return the `a+b@NN%` audit label for a blend."""

    return f"{label_a}+{label_b}@{round_half_up(ratio * 100)}%"


def blend(config: BlendConfig) -> BlendResult:
    """Blend two emotion profiles.

    Ratio is clamped to `[0, 1]`; warmth and clarity to `MODULATION_RANGE`.
    The returned pitch/rate are raw; use `BlendResult.to_parameters` to obtain
    clamped values for dispatch.
    """

    ratio = clamp(config.ratio, *RATIO_RANGE)
    warmth = clamp(config.warmth, *MODULATION_RANGE)
    clarity = clamp(config.clarity, *MODULATION_RANGE)

    first = base_values_for(config.label_a)
    second = base_values_for(config.label_b)
    pitch = first.pitch * (1 - ratio) + second.pitch * ratio
    rate = first.rate * (1 - ratio) + second.rate * ratio

    return BlendResult(
        pitch=pitch * warmth,
        rate=rate * clarity,
        label=blend_label(config.label_a, config.label_b, ratio),
    )
