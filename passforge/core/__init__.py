"""
Passforge Core Module
======================

Data models and exceptions for the Passforge generator. The engine lives
in :mod:`passforge.core.engine`.
"""

from passforge.core.errors import PassforgeError, RandomSourceUnavailable
from passforge.core.models import (
    SIMILAR_CHARACTERS,
    CharacterClass,
    GenerationConfig,
    GenerationResult,
    StrengthLabel,
    StrengthTier,
    UniformityReport,
)

__all__ = [
    "SIMILAR_CHARACTERS",
    "CharacterClass",
    "GenerationConfig",
    "GenerationResult",
    "PassforgeError",
    "RandomSourceUnavailable",
    "StrengthLabel",
    "StrengthTier",
    "UniformityReport",
]
