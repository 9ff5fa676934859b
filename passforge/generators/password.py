"""
Password Generator
===================

Produces random strings over the alphabet of a :class:`GenerationConfig`.

Two paths exist:

* **Independent** -- every position is an independent uniform draw from
  the full alphabet.
* **Require each class** -- one character is drawn from each selected
  class (canonical order), the rest is filled from the full alphabet, and
  the buffer is Fisher-Yates shuffled so the guaranteed characters do not
  sit at predictable positions.

When more classes are selected than the requested length allows, the
guarantee cannot be met and generation silently takes the independent
path. A class whose every character is filtered out as similar-looking
contributes no guaranteed character.
"""

from __future__ import annotations

from typing import Optional

from shared.logger import ForgeLogger

from passforge.core.models import GenerationConfig
from passforge.generators.charset import build_charset, class_charset
from passforge.generators.secure_random import SecureRandom

logger = ForgeLogger("generator")


class PasswordGenerator:
    """Constrained random string generator.

    Usage::

        generator = PasswordGenerator()
        config = GenerationConfig.from_flags(16, lowercase=True, numbers=True,
                                             require_each_class=True)
        password = generator.generate(config)

    Args:
        rng: Sampler used for every draw and for the shuffle.
    """

    def __init__(self, rng: Optional[SecureRandom] = None) -> None:
        self._rng = rng or SecureRandom()

    def generate(self, config: GenerationConfig) -> str:
        """Generate a password for *config*.

        Returns:
            A string of ``config.length`` characters, or ``""`` when the
            effective alphabet is empty.

        Raises:
            RandomSourceUnavailable: The entropy source failed.
        """
        alphabet = build_charset(config)
        if not alphabet:
            return ""

        if not config.require_each_class:
            return self._independent(alphabet, config.length)

        active = config.ordered_classes
        if len(active) > config.length:
            logger.debug(
                "Class requirement infeasible, using independent draws",
                classes=len(active),
                length=config.length,
            )
            return self._independent(alphabet, config.length)

        chosen: list[str] = []
        for character_class in active:
            chars = class_charset(character_class, config.exclude_similar)
            if not chars:
                continue
            chosen.append(chars[self._rng.uniform_int(len(chars))])

        buffer = chosen + self._draw(alphabet, config.length - len(chosen))
        self._rng.shuffle(buffer)
        return "".join(buffer)

    # ------------------------------------------------------------------ #
    #  Helpers
    # ------------------------------------------------------------------ #

    def _independent(self, alphabet: str, length: int) -> str:
        return "".join(self._draw(alphabet, length))

    def _draw(self, alphabet: str, count: int) -> list[str]:
        """*count* independent uniform characters from *alphabet*, in draw order."""
        size = len(alphabet)
        return [alphabet[self._rng.uniform_int(size)] for _ in range(count)]


def generate(config: GenerationConfig) -> str:
    """Generate a password for *config* with a fresh :class:`PasswordGenerator`."""
    return PasswordGenerator().generate(config)
