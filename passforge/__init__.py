"""
Passforge -- Constrained Secure Password Generator
===================================================

Generates uniformly random passwords over a selectable alphabet using a
cryptographically secure source, and estimates the entropy of a
configuration.

Modules:
    - passforge.core.models: Pydantic data models
    - passforge.core.engine: Facade used by presentation layers
    - passforge.generators: Sampler, alphabet builder, generator
    - passforge.analyzers: Strength estimation and sampler audit

Core entry points::

    from passforge import GenerationConfig, generate, estimate_strength

    config = GenerationConfig.from_flags(16, lowercase=True, numbers=True)
    password = generate(config)
    tier = estimate_strength(config)
"""

from passforge.core.errors import PassforgeError, RandomSourceUnavailable
from passforge.core.models import (
    CharacterClass,
    GenerationConfig,
    GenerationResult,
    StrengthLabel,
    StrengthTier,
)
from passforge.generators.password import generate
from passforge.analyzers.strength import estimate_strength
from passforge.core.engine import PassforgeEngine

__version__ = "1.0.0"
__tool_name__ = "passforge"

__all__ = [
    "CharacterClass",
    "GenerationConfig",
    "GenerationResult",
    "PassforgeEngine",
    "PassforgeError",
    "RandomSourceUnavailable",
    "StrengthLabel",
    "StrengthTier",
    "estimate_strength",
    "generate",
]
