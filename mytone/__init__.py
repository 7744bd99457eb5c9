"""Top-level package for MyTone.

This package classifies free-form text into an emotion label, derives voice
synthesis parameters from emotion labels, blends two emotion profiles, and
scores voice configurations with a style-similarity heuristic. Audio output is
delegated to an injected speech engine via `Speaker`.
"""

from .emotion import apply_modifiers, blend, classify, score
from .tts import Speaker

__all__ = ["Speaker", "apply_modifiers", "blend", "classify", "score", "__version__"]

__version__ = "0.9.0"
