"""Emotion scoring and parameter derivation core.

This package contains the lexical classifier, the parameter tables with their
compositor, the blend engine, and the similarity heuristic. Every function is
pure and takes its inputs explicitly.
"""

from .blend import blend
from .classifier import classify, score_text
from .compositor import apply_modifiers, compose, finalize_parameters
from .similarity import score
from .tables import BASE_VALUE_TABLE, MODIFIER_TABLE

__all__ = [
    "BASE_VALUE_TABLE",
    "MODIFIER_TABLE",
    "apply_modifiers",
    "blend",
    "classify",
    "compose",
    "finalize_parameters",
    "score",
    "score_text",
]
