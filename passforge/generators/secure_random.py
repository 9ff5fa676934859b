"""
Secure Random Integer Sampler
==============================

Unbiased integers in ``[0, n)`` from a cryptographically secure byte source.

Each sample reads four fresh bytes as an unsigned 32-bit integer ``r`` and
accepts it only below ``limit = floor(2^32 / n) * n``, the largest multiple
of *n* not exceeding ``2^32``. Accepted values are reduced modulo *n*. Every
residue then has exactly ``limit / n`` preimages, so there is no modulo bias.

The loop is bounded in practice: a draw is rejected with probability
``(2^32 - limit) / 2^32 < n / 2^32``, which is below 1/2 for every
``n <= 2^32``. The expected number of draws per sample is ``2^32 / limit``,
below 2 in the worst case and indistinguishable from 1 for the alphabet
sizes a password generator uses.

References:
    - Knuth, D. E. (1997). The Art of Computer Programming, Volume 2:
      Seminumerical Algorithms (3rd ed.). Section 3.4.1.
    - Lemire, D. (2019). Fast Random Integer Generation in an Interval.
      ACM Transactions on Modeling and Computer Simulation, 29(1).
    - Python ``secrets`` module. https://docs.python.org/3/library/secrets.html
"""

from __future__ import annotations

import secrets
from typing import Callable, MutableSequence, TypeVar

from passforge.core.errors import RandomSourceUnavailable

T = TypeVar("T")

# Width of a single draw
_DRAW_BYTES = 4
_DRAW_SPACE = 1 << (8 * _DRAW_BYTES)

ByteSource = Callable[[int], bytes]


class SecureRandom:
    """Rejection-sampling integer generator over a cryptographic byte source.

    Usage::

        rng = SecureRandom()
        index = rng.uniform_int(84)

    Args:
        source: Callable returning *n* cryptographically secure bytes.
            Defaults to :func:`secrets.token_bytes`. Fresh bytes are
            requested for every draw.
    """

    def __init__(self, source: ByteSource | None = None) -> None:
        self._source: ByteSource = source or secrets.token_bytes

    def uniform_int(self, max_exclusive: int) -> int:
        """Return a uniformly distributed integer in ``[0, max_exclusive)``.

        ``max_exclusive <= 0`` is a degenerate input: the result is 0 and the
        entropy source is not consulted.

        Raises:
            RandomSourceUnavailable: The entropy source failed.
            ValueError: *max_exclusive* exceeds the 32-bit draw space.
        """
        if max_exclusive <= 0:
            return 0
        if max_exclusive > _DRAW_SPACE:
            raise ValueError(
                f"max_exclusive must not exceed 2**{8 * _DRAW_BYTES}, "
                f"got {max_exclusive}"
            )

        limit = (_DRAW_SPACE // max_exclusive) * max_exclusive
        while True:
            r = self._draw()
            if r < limit:
                return r % max_exclusive

    def shuffle(self, buffer: MutableSequence[T]) -> None:
        """Shuffle *buffer* in place with the Fisher-Yates algorithm.

        Walks from the last index down to 1, swapping position ``i`` with a
        uniform ``j`` in ``[0, i]``. Every permutation is equally likely.
        """
        for i in range(len(buffer) - 1, 0, -1):
            j = self.uniform_int(i + 1)
            buffer[i], buffer[j] = buffer[j], buffer[i]

    @staticmethod
    def expected_draws(max_exclusive: int) -> float:
        """Expected number of 32-bit draws per :meth:`uniform_int` call."""
        if max_exclusive <= 0:
            return 0.0
        limit = (_DRAW_SPACE // max_exclusive) * max_exclusive
        return _DRAW_SPACE / limit

    def _draw(self) -> int:
        try:
            raw = self._source(_DRAW_BYTES)
        except (OSError, NotImplementedError) as exc:
            raise RandomSourceUnavailable(
                f"Cryptographic entropy source failed: {exc}"
            ) from exc

        if raw is None or len(raw) < _DRAW_BYTES:
            raise RandomSourceUnavailable(
                f"Entropy source returned {0 if raw is None else len(raw)} "
                f"bytes, expected {_DRAW_BYTES}"
            )
        return int.from_bytes(raw[:_DRAW_BYTES], "big")


_default_rng = SecureRandom()


def uniform_int(max_exclusive: int) -> int:
    """Module-level :meth:`SecureRandom.uniform_int` on a default instance."""
    return _default_rng.uniform_int(max_exclusive)
