"""Display hints for rendering collaborators.

Only the winning label crosses this boundary; colors and animation are the
renderer's business.
"""

from __future__ import annotations

_DISPLAY_LABELS = {
    "happy": "Happy",
    "sad": "Sad",
    "angry": "Angry",
    "professional": "Professional",
    "soft": "Soft",
    "storytelling": "Storytelling",
    "questioning": "Questioning",
}

_HIGHLIGHT_CLASSES = {
    "happy": "hl-happy",
    "sad": "hl-sad",
    "energetic": "hl-excited",
    "calm": "hl-calm",
    "angry": "hl-angry",
    "professional": "hl-professional",
    "storytelling": "hl-storytelling",
}


def display_label(label: str) -> str:
    """Return a human-readable label, `-` when there is nothing to show."""

    return _DISPLAY_LABELS.get(label, "-")


def highlight_class(label: str) -> str | None:
    """Return the text highlight class for `label`, if it has one."""

    return _HIGHLIGHT_CLASSES.get(label)


def suggestion_text(label: str) -> str:
    """Return analyzer suggestion text for a detected label."""

    if label == "normal":
        return "No strong emotion"
    return display_label(label)
