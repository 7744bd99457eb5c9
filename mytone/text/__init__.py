"""Text helpers used before classification and speech."""

from .templates import TEMPLATES, get_template, preview_text

__all__ = ["TEMPLATES", "get_template", "preview_text"]
