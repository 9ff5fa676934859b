"""Tests for entropy estimation and strength tiers."""

import math
from unittest.mock import patch

import pytest

from passforge.analyzers.strength import (
    StrengthEstimator,
    bits_for_alphabet_size,
    bits_per_char,
    estimate_strength,
    tier_for,
    total_entropy,
)
from passforge.core.models import CharacterClass, GenerationConfig, StrengthLabel


# ── bits_per_char / total_entropy ──────────────────────────────────────────


class TestEntropy:
    def test_empty_alphabet_is_zero_bits(self):
        assert bits_per_char(GenerationConfig(length=16)) == 0.0
        assert bits_for_alphabet_size(0) == 0.0

    def test_lowercase(self):
        config = GenerationConfig.from_flags(4, lowercase=True)
        bits = bits_per_char(config)
        assert bits == pytest.approx(4.700, abs=1e-3)
        assert total_entropy(bits, 4) == pytest.approx(18.8, abs=0.05)

    def test_all_classes(self):
        config = GenerationConfig.from_flags(
            16, lowercase=True, uppercase=True, numbers=True, symbols=True
        )
        bits = bits_per_char(config)
        assert bits == pytest.approx(math.log2(84))
        assert bits == pytest.approx(6.392, abs=1e-3)
        assert total_entropy(bits, 16) == pytest.approx(102.3, abs=0.05)

    def test_exclusion_shrinks_alphabet(self):
        plain = GenerationConfig.from_flags(8, lowercase=True, numbers=True)
        filtered = GenerationConfig.from_flags(
            8, lowercase=True, numbers=True, exclude_similar=True
        )
        assert bits_per_char(filtered) == pytest.approx(math.log2(32))
        assert bits_per_char(filtered) < bits_per_char(plain)

    def test_monotonic_in_length(self):
        bits = math.log2(62)
        values = [total_entropy(bits, n) for n in range(0, 65)]
        assert values == sorted(values)

    def test_monotonic_in_alphabet_size(self):
        values = [bits_for_alphabet_size(n) for n in range(0, 100)]
        assert values == sorted(values)

    def test_estimation_draws_no_randomness(self):
        config = GenerationConfig.from_flags(16, lowercase=True, symbols=True)
        with patch("secrets.token_bytes") as token_bytes:
            estimate_strength(config)
        token_bytes.assert_not_called()


# ── tier_for ───────────────────────────────────────────────────────────────


class TestTierFor:
    @pytest.mark.parametrize(
        "bits, label, pct",
        [
            (0.0, StrengthLabel.VERY_WEAK, 15),
            (27.9, StrengthLabel.VERY_WEAK, 15),
            (28.0, StrengthLabel.WEAK, 30),
            (35.99, StrengthLabel.WEAK, 30),
            (36.0, StrengthLabel.MEDIUM, 55),
            (59.9, StrengthLabel.MEDIUM, 55),
            (60.0, StrengthLabel.STRONG, 80),
            (127.9, StrengthLabel.STRONG, 80),
            (128.0, StrengthLabel.VERY_STRONG, 100),
            (512.0, StrengthLabel.VERY_STRONG, 100),
        ],
    )
    def test_bands(self, bits, label, pct):
        tier = tier_for(bits)
        assert tier.label is label
        assert tier.percentage == pct
        assert tier.entropy_bits == bits

    def test_ordinals(self):
        assert [tier_for(b).label.ordinal for b in (0, 30, 40, 100, 200)] == [
            1, 2, 3, 4, 5,
        ]


# ── StrengthEstimator ──────────────────────────────────────────────────────


class TestStrengthEstimator:
    def test_lowercase_scenario(self):
        tier = StrengthEstimator().estimate(
            GenerationConfig.from_flags(4, lowercase=True)
        )
        assert tier.label is StrengthLabel.VERY_WEAK
        assert tier.percentage == 15
        assert tier.entropy_bits == pytest.approx(18.8, abs=0.05)

    def test_all_classes_scenario(self):
        config = GenerationConfig(length=16, classes=frozenset(CharacterClass))
        tier = estimate_strength(config)
        assert tier.label is StrengthLabel.STRONG
        assert tier.percentage == 80
        assert tier.summary == "Strong · estimated entropy 102.3 bits"

    def test_empty_alphabet(self):
        tier = estimate_strength(GenerationConfig(length=32))
        assert tier.label is StrengthLabel.VERY_WEAK
        assert tier.entropy_bits == 0.0

    def test_negative_length_clamps_entropy(self):
        tier = StrengthEstimator().estimate_for_size(26, -4)
        assert tier.entropy_bits == 0.0
        assert tier.label is StrengthLabel.VERY_WEAK
