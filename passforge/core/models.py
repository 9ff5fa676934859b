"""
Passforge Core Data Models
===========================

Pydantic models and enumerations for the Passforge generator: the four
character classes and their literal sets, the immutable generation
configuration, strength tiers, and the result/report types returned by
the engine.

All models are immutable values recomputed on every call; nothing here
holds state across invocations.

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines --
      Authentication and Lifecycle Management.
    - Pydantic v2 documentation. https://docs.pydantic.dev/latest/
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field


# ===================================================================== #
#  Character Classes
# ===================================================================== #


class CharacterClass(str, enum.Enum):
    """Selectable character class.

    Declaration order is the canonical order in which class character
    sets are concatenated into an alphabet.
    """

    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    NUMBERS = "numbers"
    SYMBOLS = "symbols"

    @property
    def characters(self) -> str:
        """The fixed, ordered literal character set of this class."""
        return _CLASS_CHARACTERS[self]


_CLASS_CHARACTERS: dict[CharacterClass, str] = {
    CharacterClass.LOWERCASE: "abcdefghijklmnopqrstuvwxyz",
    CharacterClass.UPPERCASE: "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    CharacterClass.NUMBERS: "0123456789",
    CharacterClass.SYMBOLS: "!@#$%^&*()-_=+[]{};:,.",
}

# Characters easily confused with one another in common fonts
SIMILAR_CHARACTERS: frozenset[str] = frozenset({"0", "O", "o", "1", "l", "I"})


# ===================================================================== #
#  Generation Configuration
# ===================================================================== #


class GenerationConfig(BaseModel):
    """Immutable input to generation and strength estimation.

    No range checks happen here: a zero or negative length and an empty
    class selection are valid inputs whose outcome the consumers define
    (an empty password, an empty alphabet).

    Attributes:
        length: Requested number of characters.
        classes: Selected character classes.
        exclude_similar: Drop visually ambiguous characters from the alphabet.
        require_each_class: Guarantee at least one character per selected class.
    """

    model_config = ConfigDict(frozen=True)

    length: int
    classes: frozenset[CharacterClass] = Field(default_factory=frozenset)
    exclude_similar: bool = False
    require_each_class: bool = False

    @classmethod
    def from_flags(
        cls,
        length: int,
        *,
        lowercase: bool = False,
        uppercase: bool = False,
        numbers: bool = False,
        symbols: bool = False,
        exclude_similar: bool = False,
        require_each_class: bool = False,
    ) -> GenerationConfig:
        """Build a config from one boolean per class, as a settings form holds them."""
        flags = {
            CharacterClass.LOWERCASE: lowercase,
            CharacterClass.UPPERCASE: uppercase,
            CharacterClass.NUMBERS: numbers,
            CharacterClass.SYMBOLS: symbols,
        }
        return cls(
            length=length,
            classes=frozenset(c for c, enabled in flags.items() if enabled),
            exclude_similar=exclude_similar,
            require_each_class=require_each_class,
        )

    @property
    def ordered_classes(self) -> list[CharacterClass]:
        """Selected classes in canonical order."""
        return [c for c in CharacterClass if c in self.classes]


# ===================================================================== #
#  Strength Models
# ===================================================================== #


class StrengthLabel(str, enum.Enum):
    """Qualitative strength level, weakest first."""

    VERY_WEAK = "very_weak"
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"
    VERY_STRONG = "very_strong"

    @property
    def ordinal(self) -> int:
        """1 for ``VERY_WEAK`` up to 5 for ``VERY_STRONG``."""
        return list(StrengthLabel).index(self) + 1

    @property
    def display(self) -> str:
        return self.value.replace("_", " ").capitalize()


class StrengthTier(BaseModel):
    """Strength band for an entropy estimate.

    Attributes:
        label: Qualitative level.
        percentage: Meter fill in [0, 100].
        entropy_bits: Estimated total entropy in bits.
    """

    model_config = ConfigDict(frozen=True)

    label: StrengthLabel
    percentage: int = Field(ge=0, le=100)
    entropy_bits: float = Field(ge=0.0)

    @property
    def summary(self) -> str:
        """One-line description, e.g. ``"Strong · estimated entropy 102.3 bits"``."""
        return f"{self.label.display} · estimated entropy {self.entropy_bits:.1f} bits"


class GenerationResult(BaseModel):
    """A generated password together with the strength of its configuration.

    Attributes:
        password: The generated string (empty when the alphabet is empty).
        strength: Strength tier of the configuration.
        alphabet_size: Size of the effective alphabet.
    """

    model_config = ConfigDict(frozen=True)

    password: str
    strength: StrengthTier
    alphabet_size: int = Field(ge=0)

    def __repr__(self) -> str:
        # Keep the secret out of reprs and tracebacks
        return (
            f"GenerationResult(password='***', strength={self.strength.label.value}, "
            f"alphabet_size={self.alphabet_size})"
        )

    __str__ = __repr__


# ===================================================================== #
#  Sampler Audit Models
# ===================================================================== #


class UniformityReport(BaseModel):
    """Outcome of a chi-squared uniformity audit of the integer sampler.

    Attributes:
        max_exclusive: Upper bound passed to the sampler; number of bins.
        draws: Number of samples drawn.
        observed: Count of draws landing in each bin.
        expected: Expected count per bin under uniformity.
        chi_squared: Pearson chi-squared statistic.
        p_value: Probability of a statistic at least this large under H0.
        significance: Rejection threshold (alpha).
        passed: ``p_value >= significance``.
    """

    max_exclusive: int
    draws: int
    observed: list[int] = Field(default_factory=list)
    expected: float = 0.0
    chi_squared: float = 0.0
    p_value: float = 1.0
    significance: float = 0.01
    passed: bool = False
