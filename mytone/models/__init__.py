"""Shared typed data models for MyTone.

This package contains dataclasses used across modules to avoid cross-module
coupling and circular imports.
"""

from .datatypes import (
    DEFAULT_EMOTION,
    EMOTION_LABELS,
    BlendConfig,
    BlendResult,
    SimilarityInput,
    SimilarityScore,
    SpeechRequest,
    UtteranceParameters,
)

__all__ = [
    "DEFAULT_EMOTION",
    "EMOTION_LABELS",
    "BlendConfig",
    "BlendResult",
    "SimilarityInput",
    "SimilarityScore",
    "SpeechRequest",
    "UtteranceParameters",
]
