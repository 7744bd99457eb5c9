"""Map a point on the two-axis tuner graph to tone and rate control values.

The horizontal axis drives tone, the vertical axis drives rate (top is
fastest). Both span `TUNER_MIN..TUNER_MAX`.
"""

from __future__ import annotations

from .models.datatypes import clamp

TUNER_MIN = 0.8
TUNER_MAX = 1.3


def tuner_position_to_settings(
    x: float, y: float, width: float, height: float
) -> tuple[float, float]:
    """Return `(tone, rate)` for a pointer position inside a `width` x `height` box.

    Raises:
        ValueError: If the box has no area.
    """

    if width <= 0 or height <= 0:
        raise ValueError("Tuner box `width` and `height` must be positive.")
    x = clamp(x, 0.0, width)
    y = clamp(y, 0.0, height)
    span = TUNER_MAX - TUNER_MIN
    tone = TUNER_MIN + (x / width) * span
    rate = TUNER_MIN + (1 - y / height) * span
    return round(tone, 2), round(rate, 2)
