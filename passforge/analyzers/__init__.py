"""
Passforge Analyzers
====================

Entropy-based strength estimation and the chi-squared audit of the
integer sampler.
"""

from passforge.analyzers.strength import (
    StrengthEstimator,
    bits_per_char,
    total_entropy,
    tier_for,
)
from passforge.analyzers.uniformity import UniformityTester

__all__ = [
    "StrengthEstimator",
    "bits_per_char",
    "total_entropy",
    "tier_for",
    "UniformityTester",
]
