"""Heuristic style-similarity score for a text and voice configuration.

The score is a display aid, not an acoustic metric.
"""

from __future__ import annotations

from ..models.datatypes import SimilarityInput, SimilarityScore, clamp
from ..parsing import round_half_up

BASE_SCORE = 50.0
BRIGHT_EMOTIONS = frozenset({"friendly", "happy", "energetic"})
MUTED_EMOTIONS = frozenset({"sad", "soft"})

TIER_TIPS = {
    "great": "Great match - strong style!",
    "good": "Good match - keep refining.",
    "weak": "Weak match - adjust tone & speed.",
}


def tier_for(value: int) -> str:
    """Map a score value to its tier name."""

    if value > 80:
        return "great"
    if value > 60:
        return "good"
    return "weak"


def _result(value: int) -> SimilarityScore:
    tier = tier_for(value)
    return SimilarityScore(value=value, tier=tier, tip=TIER_TIPS[tier])


def score(payload: SimilarityInput) -> SimilarityScore:
    """Score how well a text/tone/emotion combination matches a lively style."""

    text = payload.text
    if not text or not text.strip():
        return _result(0)

    total = BASE_SCORE
    if len(text) > 150:
        total += 10
    if len(text) < 40:
        total -= 10

    if payload.tone > 1.2:
        total += 8
    if payload.tone < 0.9:
        total -= 6

    if payload.emotion in BRIGHT_EMOTIONS:
        total += 5
    if payload.emotion in MUTED_EMOTIONS:
        total -= 2

    return _result(round_half_up(clamp(total, 0.0, 100.0)))
