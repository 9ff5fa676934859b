"""Tests for the PassforgeEngine facade and package entry points."""

import json
import string
from unittest.mock import Mock

import pytest

import passforge
from passforge import (
    CharacterClass,
    GenerationConfig,
    PassforgeEngine,
    RandomSourceUnavailable,
    StrengthLabel,
)
from passforge.generators.secure_random import SecureRandom
from shared.config import PassforgeConfig
from shared.logger import ForgeLogger


@pytest.fixture
def engine(quiet_config):
    return PassforgeEngine(quiet_config)


# ── Generation ─────────────────────────────────────────────────────────────


class TestGenerate:
    def test_generate(self, engine):
        config = GenerationConfig.from_flags(20, lowercase=True, numbers=True)
        password = engine.generate(config)
        assert len(password) == 20
        assert set(password) <= set(string.ascii_lowercase + string.digits)

    def test_empty_alphabet(self, engine):
        assert engine.generate(GenerationConfig(length=12)) == ""

    def test_source_failure_is_reraised(self, quiet_config):
        rng = SecureRandom(source=Mock(side_effect=OSError("no entropy")))
        engine = PassforgeEngine(quiet_config, rng=rng)
        with pytest.raises(RandomSourceUnavailable):
            engine.generate(GenerationConfig.from_flags(8, lowercase=True))

    def test_generate_with_strength(self, engine):
        config = GenerationConfig(length=16, classes=frozenset(CharacterClass))
        result = engine.generate_with_strength(config)
        assert len(result.password) == 16
        assert result.alphabet_size == 84
        assert result.strength.label is StrengthLabel.STRONG
        assert result.strength.percentage == 80

    def test_result_repr_hides_password(self, engine):
        config = GenerationConfig.from_flags(16, lowercase=True)
        result = engine.generate_with_strength(config)
        assert result.password not in repr(result)
        assert result.password not in str(result)


# ── Estimation ─────────────────────────────────────────────────────────────


class TestEstimateStrength:
    def test_estimate(self, engine):
        tier = engine.estimate_strength(GenerationConfig.from_flags(4, lowercase=True))
        assert tier.label is StrengthLabel.VERY_WEAK
        assert tier.percentage == 15

    def test_estimate_draws_no_randomness(self, quiet_config):
        source = Mock()
        engine = PassforgeEngine(quiet_config, rng=SecureRandom(source=source))
        engine.estimate_strength(GenerationConfig.from_flags(32, lowercase=True))
        source.assert_not_called()


# ── Audit and defaults ─────────────────────────────────────────────────────


class TestAuditAndDefaults:
    def test_audit_uses_explicit_arguments(self, engine):
        report = engine.audit_uniformity(max_exclusive=5, draws=5_000)
        assert report.max_exclusive == 5
        assert report.draws == 5_000
        assert sum(report.observed) == 5_000

    def test_audit_uses_configured_defaults(self, quiet_config):
        quiet_config.audit.max_exclusive = 3
        quiet_config.audit.draws = 3_000
        quiet_config.audit.significance = 0.001
        report = PassforgeEngine(quiet_config).audit_uniformity()
        assert (report.max_exclusive, report.draws) == (3, 3_000)
        assert report.significance == 0.001

    def test_default_generation_config(self, quiet_config):
        quiet_config.generator.length = 12
        quiet_config.generator.symbols = False
        config = PassforgeEngine(quiet_config).default_generation_config()
        assert config.length == 12
        assert CharacterClass.SYMBOLS not in config.classes
        assert config.require_each_class is True


# ── Package entry points ───────────────────────────────────────────────────


class TestPackageEntryPoints:
    def test_generate_and_estimate(self):
        config = GenerationConfig.from_flags(
            10, lowercase=True, uppercase=True, require_each_class=True
        )
        password = passforge.generate(config)
        assert len(password) == 10
        assert any(ch.isupper() for ch in password)
        assert passforge.estimate_strength(config).label is StrengthLabel.MEDIUM


# ── Logging ────────────────────────────────────────────────────────────────


def _file_logged_config(path):
    config = PassforgeConfig()
    config.global_settings.console_logging = False
    config.global_settings.log_level = "DEBUG"
    config.global_settings.log_json = True
    config.global_settings.log_file = str(path)
    return config


def _messages(path):
    if not path.exists():
        return []
    lines = path.read_text(encoding="utf-8").splitlines()
    return [json.loads(line)["message"] for line in lines]


class TestEngineLogging:
    def test_engines_do_not_share_log_files(self, tmp_path):
        first = PassforgeEngine(_file_logged_config(tmp_path / "one.log"))
        second = PassforgeEngine(_file_logged_config(tmp_path / "two.log"))
        assert first.logger.underlying is not second.logger.underlying

        first.generate(GenerationConfig.from_flags(8, lowercase=True))
        assert "Password generated" in _messages(tmp_path / "one.log")
        assert _messages(tmp_path / "two.log") == []

        second.generate(GenerationConfig.from_flags(8, lowercase=True))
        assert _messages(tmp_path / "one.log").count("Password generated") == 1

    def test_injected_logger_is_used(self, quiet_config):
        logger = Mock(spec=ForgeLogger)
        engine = PassforgeEngine(quiet_config, logger=logger)
        assert engine.logger is logger
        engine.estimate_strength(GenerationConfig.from_flags(8, lowercase=True))
        logger.debug.assert_called_once()

    def test_non_positive_length_is_not_an_empty_alphabet(self, tmp_path):
        path = tmp_path / "engine.log"
        engine = PassforgeEngine(_file_logged_config(path))
        assert engine.generate(GenerationConfig.from_flags(0, lowercase=True)) == ""
        messages = _messages(path)
        assert "Empty alphabet, no password generated" not in messages
        assert "Password generated" in messages

    def test_empty_alphabet_is_warned(self, tmp_path):
        path = tmp_path / "engine.log"
        engine = PassforgeEngine(_file_logged_config(path))
        assert engine.generate(GenerationConfig(length=12)) == ""
        assert "Empty alphabet, no password generated" in _messages(path)
