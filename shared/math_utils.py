"""
Passforge Mathematical Utilities
=================================

Statistics primitives backing the sampler audit: histogramming of integer
draws and Pearson's chi-squared goodness-of-fit test with a p-value from
the regularised upper incomplete gamma function.

References:
    [1] Pearson, K. (1900). On the Criterion that a Given System of
        Deviations ... Philosophical Magazine, 50(302), 157-175.
    [2] Press, W. H. et al. (2007). Numerical Recipes (3rd ed.).
        Cambridge University Press, Section 6.2.
    [3] Knuth, D. E. (1997). The Art of Computer Programming, Volume 2:
        Seminumerical Algorithms (3rd ed.). Section 3.3.1.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
from numpy.typing import NDArray


# ---------------------------------------------------------------------------
#  Type aliases for readability
# ---------------------------------------------------------------------------
FloatArray = NDArray[np.floating]
IntArray = NDArray[np.integer]


# ======================== Histogramming ====================================


def bin_counts(samples: Sequence[int], bins: int) -> IntArray:
    """Count occurrences of each integer value in ``[0, bins)``.

    Args:
        samples: Integer draws, each expected in ``[0, bins)``.
        bins:    Number of categories.

    Returns:
        Integer array of length *bins*; entry *k* is the number of draws
        equal to *k*.

    Raises:
        ValueError: If *bins* is not positive or any sample lies outside
            ``[0, bins)``.
    """
    if bins <= 0:
        raise ValueError("bins must be positive")

    arr = np.asarray(samples, dtype=np.int64)
    if arr.size and (arr.min() < 0 or arr.max() >= bins):
        raise ValueError(f"samples must lie in [0, {bins})")

    return np.bincount(arr, minlength=bins)


# ======================== Statistical Tests ================================


def chi_squared_test(
    observed: FloatArray, expected: FloatArray
) -> tuple[float, float]:
    """Perform Pearson's chi-squared goodness-of-fit test.

    The test statistic is:

    .. math::

        \\chi^2 = \\sum_i \\frac{(O_i - E_i)^2}{E_i}

    The p-value is ``Q(k/2, chi2/2)`` with ``k = len(observed) - 1``
    degrees of freedom, matching ``scipy.stats.chi2.sf`` without SciPy.

    Args:
        observed: Observed frequency counts (1-D array of length *k*).
        expected: Expected frequency counts (1-D array of length *k*).

    Returns:
        Tuple of ``(chi2_statistic, p_value)``.

    Raises:
        ValueError: If arrays differ in shape or expected contains zeros.
    """
    observed = np.asarray(observed, dtype=np.float64)
    expected = np.asarray(expected, dtype=np.float64)

    if observed.shape != expected.shape:
        raise ValueError("Array shapes must match")
    if np.any(expected <= 0):
        raise ValueError("Expected values must be > 0")

    chi2 = float(np.sum((observed - expected) ** 2 / expected))
    dof = len(observed) - 1

    if dof <= 0:
        return chi2, 1.0

    p_value = _upper_inc_gamma_reg(dof / 2.0, chi2 / 2.0)
    return chi2, p_value


# --------------- Incomplete gamma helpers (Numerical Recipes, Ch. 6) ------


def _upper_inc_gamma_reg(a: float, x: float) -> float:
    """Regularised upper incomplete gamma Q(a, x) = 1 - P(a, x).

    Series expansion below ``x < a + 1``, Lentz continued fraction above.
    """
    if x <= 0.0 or a <= 0.0:
        return 1.0

    if x < a + 1.0:
        return 1.0 - _gamma_p_series(a, x)
    return _gamma_q_cf(a, x)


def _gamma_p_series(a: float, x: float) -> float:
    """Lower regularised incomplete gamma P(a, x) by series expansion."""
    ap = a
    delta = 1.0 / a
    total = delta
    for _ in range(300):
        ap += 1.0
        delta *= x / ap
        total += delta
        if abs(delta) < abs(total) * 1e-15:
            break
    return total * math.exp(-x + a * math.log(x) - math.lgamma(a))


def _gamma_q_cf(a: float, x: float) -> float:
    """Upper regularised incomplete gamma Q(a, x) by Lentz continued fraction."""
    tiny = 1e-30
    b = x + 1.0 - a
    c = 1.0 / tiny
    d = 1.0 / b
    f = d
    for i in range(1, 300):
        an = -i * (i - a)
        b += 2.0
        d = an * d + b
        if abs(d) < tiny:
            d = tiny
        c = b + an / c
        if abs(c) < tiny:
            c = tiny
        d = 1.0 / d
        delta = d * c
        f *= delta
        if abs(delta - 1.0) < 1e-15:
            break
    return f * math.exp(-x + a * math.log(x) - math.lgamma(a))
