"""
Passforge Configuration Management
===================================

Centralized configuration for the Passforge generator using Python
dataclasses and TOML-based persistence.

Configuration is kept apart from code: the generator core only ever sees an
explicit :class:`~passforge.core.models.GenerationConfig` value, while the
defaults a host application starts from live here.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[no-redef]


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "passforge.toml"


# ========================== Section Configs ================================


@dataclass(frozen=False, slots=True)
class GeneratorDefaults:
    """Default generation options offered to a host application.

    These mirror the controls of a typical generator form: a length slider,
    one toggle per character class, and the two structural constraints.
    """

    length: int = 16
    lowercase: bool = True
    uppercase: bool = True
    numbers: bool = True
    symbols: bool = True
    exclude_similar: bool = False
    require_each_class: bool = True


@dataclass(frozen=False, slots=True)
class AuditConfig:
    """Parameters for the chi-squared uniformity audit of the sampler.

    Reference:
        Pearson, K. (1900). On the criterion that a given system of
        deviations from the probable. Philosophical Magazine, 50(302).
    """

    max_exclusive: int = 7
    draws: int = 100_000
    significance: float = 0.01


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Logging and general operational settings."""

    log_level: str = "INFO"
    log_file: str | None = None
    log_json: bool = False
    console_logging: bool = True
    version: str = "1.0.0"


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class PassforgeConfig:
    """Master configuration aggregating every section.

    Usage:
        >>> config = PassforgeConfig.load()                  # from default path
        >>> config = PassforgeConfig.load("custom.toml")     # from custom path
        >>> print(config.generator.length)
        16
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    generator: GeneratorDefaults = field(default_factory=GeneratorDefaults)
    audit: AuditConfig = field(default_factory=AuditConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> PassforgeConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``passforge.toml`` in the
        project root.  Missing keys fall back to dataclass defaults.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated :class:`PassforgeConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            generator=cls._build_section(GeneratorDefaults, raw.get("generator", {})),
            audit=cls._build_section(AuditConfig, raw.get("audit", {})),
        )

    # ------------------------------------------------------------------ #
    #  Serialisation helpers
    # ------------------------------------------------------------------ #

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are ignored so that newer config
        files keep loading on older code.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


# ========================= Module-level convenience ========================

def get_config(path: str | Path | None = None) -> PassforgeConfig:
    """Module-level convenience wrapper around :meth:`PassforgeConfig.load`.

    Caches the result so that repeated imports share one instance.
    """
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = PassforgeConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]
