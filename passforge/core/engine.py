"""
Passforge Engine
=================

Facade over the generator and analyzers. A presentation layer (a web form,
a desktop dialog) holds one engine, turns its widget state into a
:class:`GenerationConfig`, and calls :meth:`PassforgeEngine.generate` or
:meth:`PassforgeEngine.estimate_strength`; rendering and clipboard
handling stay on its side.

Architecture follows the Facade pattern (Gamma et al., 1994).

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
      Addison-Wesley.
"""

from __future__ import annotations

import itertools
from typing import Optional

from shared.config import PassforgeConfig
from shared.logger import ForgeLogger

from passforge.analyzers.strength import StrengthEstimator
from passforge.analyzers.uniformity import UniformityTester
from passforge.core.errors import RandomSourceUnavailable
from passforge.core.models import (
    GenerationConfig,
    GenerationResult,
    StrengthTier,
    UniformityReport,
)
from passforge.generators.charset import build_charset
from passforge.generators.password import PasswordGenerator
from passforge.generators.secure_random import SecureRandom

_engine_ids = itertools.count(1)


class PassforgeEngine:
    """Entry point for generation, strength estimation, and sampler audits.

    Every call is independent: the engine keeps no per-call state, so one
    instance can serve concurrent callers.

    Usage::

        engine = PassforgeEngine()
        config = engine.default_generation_config()
        result = engine.generate_with_strength(config)
        print(result.strength.summary)

    Attributes:
        config: Passforge configuration instance.
        logger: Logger for the engine. Unless one is passed in, each engine
            gets its own ``passforge.engine.<n>`` logger so its handlers and
            level never leak into another engine.
    """

    def __init__(
        self,
        config: Optional[PassforgeConfig] = None,
        rng: Optional[SecureRandom] = None,
        logger: Optional[ForgeLogger] = None,
    ) -> None:
        self.config = config or PassforgeConfig()
        self.logger = logger or ForgeLogger.from_config(
            f"engine.{next(_engine_ids)}", self.config.global_settings
        )

        self._rng = rng or SecureRandom()
        self._generator = PasswordGenerator(self._rng)
        self._estimator = StrengthEstimator()
        self._uniformity_tester = UniformityTester(
            self._rng, significance=self.config.audit.significance
        )

    # ------------------------------------------------------------------ #
    #  Generation
    # ------------------------------------------------------------------ #

    def generate(self, config: GenerationConfig) -> str:
        """Generate one password; ``""`` when the alphabet is empty.

        Raises:
            RandomSourceUnavailable: The entropy source failed.
        """
        with self.logger.operation("generate"):
            alphabet_size = len(build_charset(config))
            try:
                password = self._generator.generate(config)
            except RandomSourceUnavailable:
                self.logger.exception("Entropy source unavailable")
                raise

            if alphabet_size == 0:
                self.logger.warning(
                    "Empty alphabet, no password generated",
                    classes=sorted(c.value for c in config.classes),
                    exclude_similar=config.exclude_similar,
                )
            else:
                self.logger.debug(
                    "Password generated",
                    length=len(password),
                    alphabet_size=alphabet_size,
                )
            return password

    def generate_with_strength(self, config: GenerationConfig) -> GenerationResult:
        """Generate a password and rate its configuration in one call."""
        alphabet_size = len(build_charset(config))
        password = self.generate(config)
        strength = self._estimator.estimate_for_size(alphabet_size, config.length)
        return GenerationResult(
            password=password,
            strength=strength,
            alphabet_size=alphabet_size,
        )

    # ------------------------------------------------------------------ #
    #  Estimation
    # ------------------------------------------------------------------ #

    def estimate_strength(self, config: GenerationConfig) -> StrengthTier:
        """Strength tier for *config*; draws no randomness."""
        tier = self._estimator.estimate(config)
        self.logger.debug(
            "Strength estimated",
            label=tier.label.value,
            entropy_bits=round(tier.entropy_bits, 1),
        )
        return tier

    # ------------------------------------------------------------------ #
    #  Audit
    # ------------------------------------------------------------------ #

    def audit_uniformity(
        self,
        max_exclusive: Optional[int] = None,
        draws: Optional[int] = None,
    ) -> UniformityReport:
        """Chi-squared audit of the sampler, defaulting to the ``[audit]`` section."""
        audit = self.config.audit
        max_exclusive = max_exclusive if max_exclusive is not None else audit.max_exclusive
        draws = draws if draws is not None else audit.draws

        with self.logger.operation("audit_uniformity"):
            with self.logger.timed(f"uniformity audit n={max_exclusive} draws={draws}"):
                report = self._uniformity_tester.run(max_exclusive, draws)
            if not report.passed:
                self.logger.warning(
                    "Sampler failed uniformity audit (p=%.6f)", report.p_value
                )
            return report

    # ------------------------------------------------------------------ #
    #  Defaults
    # ------------------------------------------------------------------ #

    def default_generation_config(self) -> GenerationConfig:
        """A :class:`GenerationConfig` built from the ``[generator]`` section."""
        defaults = self.config.generator
        return GenerationConfig.from_flags(
            defaults.length,
            lowercase=defaults.lowercase,
            uppercase=defaults.uppercase,
            numbers=defaults.numbers,
            symbols=defaults.symbols,
            exclude_similar=defaults.exclude_similar,
            require_each_class=defaults.require_each_class,
        )
