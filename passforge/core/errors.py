"""
Passforge Exceptions
=====================

Only one condition is an error for the generator core: the cryptographic
entropy source failing. An empty alphabet and an infeasible class
requirement are ordinary outcomes, not exceptions.
"""

from __future__ import annotations


class PassforgeError(Exception):
    """Base class for Passforge errors."""

    pass


class RandomSourceUnavailable(PassforgeError):
    """The cryptographic entropy source could not supply bytes.

    Fatal to the generation in progress. It is never retried and never
    replaced with a weaker generator.
    """

    pass
