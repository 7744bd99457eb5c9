"""Starter text templates and preview clipping."""

from __future__ import annotations

TEMPLATES: dict[str, str] = {
    "podcast": (
        "Welcome back to the show. I'm your host, and today we have a fantastic topic. "
        "Let's dive in!"
    ),
    "narration": (
        "Once upon a time, in a quiet village, there lived a storyteller who could make "
        "the sun listen."
    ),
    "product": (
        "Introducing our new product, engineered for speed, built for reliability, and "
        "designed for you."
    ),
    "presentation": (
        "Good morning everyone. Thank you for joining. Today I'm excited to share our progress."
    ),
}


def get_template(name: str) -> str:
    """Return template text by name.

    Raises:
        KeyError: If `name` is not a known template.
    """

    if name not in TEMPLATES:
        known = ", ".join(sorted(TEMPLATES))
        raise KeyError(f"Unknown template `{name}`; known: {known}.")
    return TEMPLATES[name]


def preview_text(text: str, limit: int = 120) -> str:
    """Return the first `limit` characters of `text`."""

    if len(text) > limit:
        return text[:limit]
    return text
