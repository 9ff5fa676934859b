"""
Strength Estimator
===================

Estimates the guessing resistance of a generation configuration:

    entropy = length * log2(alphabet size)

and maps total entropy onto five bands. The estimate assumes uniform,
independent sampling and ignores the small entropy reduction of the
require-each-class constraint. No randomness is drawn.

Bands (lower bound inclusive, first match wins):

    ======================  ===============  ==========
    Entropy (bits)          Label            Percentage
    ======================  ===============  ==========
    < 28                    very weak        15
    [28, 36)                weak             30
    [36, 60)                medium           55
    [60, 128)               strong           80
    >= 128                  very strong      100
    ======================  ===============  ==========

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines, Appendix A.
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
"""

from __future__ import annotations

import math

from passforge.core.models import GenerationConfig, StrengthLabel, StrengthTier
from passforge.generators.charset import build_charset

# (exclusive upper bound, label, percentage) in ascending order
_BANDS: list[tuple[float, StrengthLabel, int]] = [
    (28.0, StrengthLabel.VERY_WEAK, 15),
    (36.0, StrengthLabel.WEAK, 30),
    (60.0, StrengthLabel.MEDIUM, 55),
    (128.0, StrengthLabel.STRONG, 80),
]
_TOP_BAND: tuple[StrengthLabel, int] = (StrengthLabel.VERY_STRONG, 100)


def bits_for_alphabet_size(size: int) -> float:
    """``log2(size)``, or 0.0 for an empty alphabet."""
    if size <= 0:
        return 0.0
    return math.log2(size)


def bits_per_char(config: GenerationConfig) -> float:
    """Entropy contributed by each character of a password for *config*."""
    return bits_for_alphabet_size(len(build_charset(config)))


def total_entropy(bits_per_character: float, length: int) -> float:
    return bits_per_character * length


def tier_for(entropy_bits: float) -> StrengthTier:
    """Map total entropy onto its strength band."""
    for upper, label, percentage in _BANDS:
        if entropy_bits < upper:
            break
    else:
        label, percentage = _TOP_BAND
    return StrengthTier(
        label=label,
        percentage=percentage,
        entropy_bits=max(0.0, entropy_bits),
    )


class StrengthEstimator:
    """Configuration-level strength estimation.

    Usage::

        estimator = StrengthEstimator()
        tier = estimator.estimate(config)
        print(tier.summary)
    """

    def estimate(self, config: GenerationConfig) -> StrengthTier:
        """Strength tier for passwords generated from *config*."""
        return self.estimate_for_size(len(build_charset(config)), config.length)

    def estimate_for_size(self, alphabet_size: int, length: int) -> StrengthTier:
        """Strength tier for a known alphabet size, avoiding a rebuild."""
        bits = bits_for_alphabet_size(alphabet_size)
        return tier_for(total_entropy(bits, length))


def estimate_strength(config: GenerationConfig) -> StrengthTier:
    return StrengthEstimator().estimate(config)
