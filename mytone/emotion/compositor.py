"""Apply emotion modifiers to caller-chosen utterance parameters."""

from __future__ import annotations

from ..models.datatypes import UtteranceParameters
from .tables import modifier_for


def apply_modifiers(base: UtteranceParameters, label: str) -> UtteranceParameters:
    """Return `base` scaled by the modifier of `label`.

    Pitch and rate are multiplied; volume is replaced by the table override or
    passed through. Unknown labels are the identity. The result is not clamped;
    callers finalize it with `finalize_parameters` before dispatch.
    """

    modifier = modifier_for(label)
    volume = base.volume if modifier.volume_override is None else modifier.volume_override
    return UtteranceParameters(
        pitch=base.pitch * modifier.pitch_factor,
        rate=base.rate * modifier.rate_factor,
        volume=volume,
    )


def finalize_parameters(parameters: UtteranceParameters) -> UtteranceParameters:
    """Clamp composed parameters to the global synthesis ranges."""

    return parameters.clamped()


def compose(tone: float, rate: float, label: str) -> UtteranceParameters:
    """Clamp raw tone/rate, apply `label` modifiers, and clamp the result again."""

    base = UtteranceParameters(pitch=tone, rate=rate, volume=1.0).clamped()
    return finalize_parameters(apply_modifiers(base, label))
