"""Rule-based lexical emotion classifier.

Responsibilities:
- Score lower-cased text against fixed keyword lists and punctuation cues.
- Pick one emotion label with a deterministic first-declared tie-break.

Key public functions:
- `classify`: text to emotion label.
- `score_text`: ordered per-category score vector.
- `matched_keywords`: keyword substrings that contributed to each category.
"""

from __future__ import annotations

from ..models.datatypes import DEFAULT_EMOTION

CATEGORY_ORDER: tuple[str, ...] = (
    "happy",
    "sad",
    "angry",
    "professional",
    "soft",
    "storytelling",
    "question",
)

KEYWORDS: dict[str, tuple[str, ...]] = {
    "happy": (
        "happy",
        "joy",
        "awesome",
        "great",
        "love",
        "yay",
        "congrats",
        "amazing",
        "cheerful",
        "smile",
        "excited",
    ),
    "sad": ("sad", "sorry", "unhappy", "depressed", "miss", "regret", "lonely", "tear", "cry"),
    "angry": ("angry", "hate", "annoyed", "furious", "mad", "rage", "insult"),
    "professional": (
        "dear",
        "regards",
        "sincerely",
        "please find",
        "attached",
        "proposal",
        "meeting",
        "agenda",
    ),
    "soft": ("soft", "gentle", "kindly", "please", "calm", "soothing"),
    "storytelling": ("once", "long ago", "chapter", "story", "characters", "journey"),
}

KEYWORD_WEIGHT = 2.0
EXCLAMATION_BONUS = 1.0
QUESTION_BONUS = 1.0
LONG_TEXT_TOKENS = 200
LONG_TEXT_BONUS = 1.0
SHORT_TEXT_TOKENS = 6
SHORT_TEXT_BONUS = 0.8

_LABEL_REMAP = {"question": "questioning"}


def matched_keywords(text: str) -> dict[str, list[str]]:
    """Return the keywords found as substrings of the lower-cased text, per category."""

    lowered = text.lower()
    return {
        category: [keyword for keyword in keywords if keyword in lowered]
        for category, keywords in KEYWORDS.items()
    }


def score_text(text: str) -> dict[str, float]:
    """Build the ordered score vector for `text`.

    Every matching keyword adds `KEYWORD_WEIGHT` once, regardless of how often
    it occurs. Punctuation and token-count cues add their bonuses on top.
    Blank text yields an all-zero vector.
    """

    scores = {category: 0.0 for category in CATEGORY_ORDER}
    if not text or not text.strip():
        return scores

    lowered = text.lower()
    token_count = len(lowered.split())

    for category, matches in matched_keywords(lowered).items():
        scores[category] += KEYWORD_WEIGHT * len(matches)

    if "!" in lowered:
        scores["happy"] += EXCLAMATION_BONUS
    if "?" in lowered:
        scores["question"] += QUESTION_BONUS
    if token_count > LONG_TEXT_TOKENS:
        scores["storytelling"] += LONG_TEXT_BONUS
    if token_count < SHORT_TEXT_TOKENS:
        scores["professional"] += SHORT_TEXT_BONUS
    return scores


def pick_winner(scores: dict[str, float]) -> str:
    """Return the winning label; ties keep the earlier category in `CATEGORY_ORDER`."""

    winner = DEFAULT_EMOTION
    max_score = 0.0
    for category in CATEGORY_ORDER:
        value = scores.get(category, 0.0)
        if value > max_score:
            max_score = value
            winner = category
    if max_score == 0:
        return DEFAULT_EMOTION
    return _LABEL_REMAP.get(winner, winner)


def classify(text: str) -> str:
    """Classify free-form text into one emotion label.

    Empty or whitespace-only text returns `normal`.
    """

    if not text or not text.strip():
        return DEFAULT_EMOTION
    return pick_winner(score_text(text))
