"""
Sampler Uniformity Tester
==========================

Audits :meth:`SecureRandom.uniform_int` with Pearson's chi-squared
goodness-of-fit test. The sampler is drawn *draws* times over
``[0, max_exclusive)``, the draws are binned, and the counts are compared
with the flat expectation ``draws / max_exclusive``.

The null hypothesis (the sampler is uniform) is rejected when the p-value
falls below the significance level. A biased reduction such as a plain
``r % n`` without rejection would show up here for large *n*; for small
*n* the bias is far below what a sample of this size can detect, so a
pass is evidence, not proof.

References:
    - Pearson, K. (1900). On the criterion that a given system of
      deviations from the probable. Philosophical Magazine, 50(302).
    - Knuth, D. E. (1997). The Art of Computer Programming, Volume 2,
      Section 3.3.1 (The Chi-Square Test).
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from shared.logger import ForgeLogger
from shared.math_utils import bin_counts, chi_squared_test

from passforge.core.models import UniformityReport
from passforge.generators.secure_random import SecureRandom

logger = ForgeLogger("uniformity")


class UniformityTester:
    """Chi-squared audit of the integer sampler.

    Usage::

        tester = UniformityTester()
        report = tester.run(max_exclusive=7, draws=100_000)
        print(f"p={report.p_value:.4f} {'PASS' if report.passed else 'FAIL'}")

    Args:
        rng: Sampler under test.
        significance: Rejection threshold alpha.
    """

    # Pearson's approximation wants at least this many expected hits per bin
    MIN_EXPECTED_PER_BIN: int = 5

    def __init__(
        self,
        rng: Optional[SecureRandom] = None,
        significance: float = 0.01,
    ) -> None:
        if not 0.0 < significance < 1.0:
            raise ValueError("significance must lie in (0, 1)")
        self._rng = rng or SecureRandom()
        self.significance = significance

    def run(self, max_exclusive: int, draws: int) -> UniformityReport:
        """Draw, bin, and test.

        Raises:
            ValueError: Fewer than two bins, or too few draws for the
                chi-squared approximation to hold.
            RandomSourceUnavailable: The entropy source failed.
        """
        if max_exclusive < 2:
            raise ValueError("max_exclusive must be at least 2")
        if draws < max_exclusive * self.MIN_EXPECTED_PER_BIN:
            raise ValueError(
                f"draws must be at least {max_exclusive * self.MIN_EXPECTED_PER_BIN} "
                f"for {max_exclusive} bins"
            )

        samples = [self._rng.uniform_int(max_exclusive) for _ in range(draws)]
        observed = bin_counts(samples, max_exclusive)
        expected_per_bin = draws / max_exclusive
        expected = np.full(max_exclusive, expected_per_bin, dtype=np.float64)

        chi2, p_value = chi_squared_test(observed, expected)
        passed = p_value >= self.significance

        logger.info(
            "Uniformity audit: chi2=%.4f p=%.4f (%s)",
            chi2,
            p_value,
            "pass" if passed else "fail",
            max_exclusive=max_exclusive,
            draws=draws,
        )

        return UniformityReport(
            max_exclusive=max_exclusive,
            draws=draws,
            observed=[int(c) for c in observed],
            expected=expected_per_bin,
            chi_squared=chi2,
            p_value=p_value,
            significance=self.significance,
            passed=passed,
        )
