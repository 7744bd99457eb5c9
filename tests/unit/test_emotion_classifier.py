"""Unit tests for the lexical emotion classifier."""

from __future__ import annotations

import pytest

from mytone.emotion.classifier import (
    CATEGORY_ORDER,
    classify,
    matched_keywords,
    pick_winner,
    score_text,
)


@pytest.mark.parametrize("text", ["", "   ", "\n\t "])
def test_classify_returns_normal_for_blank_text(text: str) -> None:
    """Blank input should never raise and should fall back to `normal`."""

    assert classify(text) == "normal"


def test_classify_prefers_happy_with_keywords_and_exclamation() -> None:
    """Several happy keywords plus `!` should dominate the score vector."""

    text = "I am so happy and excited! great news"

    assert classify(text) == "happy"
    assert score_text(text)["happy"] == pytest.approx(7.0)


def test_classify_breaks_ties_in_declaration_order() -> None:
    """Equal happy and sad scores should resolve to the earlier category."""

    scores = score_text("happy sad")

    assert scores["happy"] == scores["sad"] == pytest.approx(2.0)
    assert classify("happy sad") == "happy"


def test_pick_winner_keeps_first_declared_category_on_equal_scores() -> None:
    """Later categories must be strictly greater to replace the running winner."""

    scores = {category: 0.0 for category in CATEGORY_ORDER}
    scores["angry"] = 3.0
    scores["soft"] = 3.0
    scores["storytelling"] = 3.0

    assert pick_winner(scores) == "angry"


def test_classify_maps_question_category_to_questioning() -> None:
    """A lone question mark should surface as the `questioning` label."""

    assert classify("Are you coming to the party tonight?") == "questioning"


def test_classify_short_text_without_keywords_leans_professional() -> None:
    """Fewer than six tokens add the short-text professional bonus."""

    scores = score_text("hello there friend")

    assert scores["professional"] == pytest.approx(0.8)
    assert classify("hello there friend") == "professional"


def test_classify_returns_normal_when_nothing_scores() -> None:
    """Six or more tokens without cues should leave every score at zero."""

    assert classify("the cat sat on the mat") == "normal"


def test_classify_detects_storytelling_and_angry_keywords() -> None:
    """Keyword lists should drive storytelling and angry detection."""

    assert classify("Once upon a time a long journey began for our hero today") == "storytelling"
    assert classify("I hate this and I am furious about the whole thing") == "angry"


def test_classify_detects_professional_phrases() -> None:
    """Multi-word keywords such as `please find` should match as substrings."""

    text = "Dear team, please find the agenda attached for the meeting"
    scores = score_text(text)

    assert scores["professional"] == pytest.approx(10.0)
    assert scores["soft"] == pytest.approx(2.0)
    assert classify(text) == "professional"


def test_long_text_adds_storytelling_bonus() -> None:
    """More than two hundred tokens should tip neutral text into storytelling."""

    text = " ".join(["word"] * 201)

    assert score_text(text)["storytelling"] == pytest.approx(1.0)
    assert classify(text) == "storytelling"


def test_keyword_counts_once_regardless_of_occurrences() -> None:
    """Repeated keywords add their weight only once."""

    assert score_text("happy happy happy happy happy happy")["happy"] == pytest.approx(2.0)


def test_keyword_matching_is_substring_based_and_case_insensitive() -> None:
    """Keywords embedded in longer words still count after lower-casing."""

    matches = matched_keywords("We flew to MADRID for the conference")

    assert matches["angry"] == ["mad"]
    assert score_text("We flew to MADRID for the conference")["angry"] == pytest.approx(2.0)


def test_score_vector_keeps_declaration_order() -> None:
    """Score vector keys should follow the fixed category order."""

    assert tuple(score_text("anything at all")) == CATEGORY_ORDER
    assert all(value == 0 for value in score_text("").values())
