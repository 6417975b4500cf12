"""Tests for the configuration system."""

from dataclasses import dataclass
from pathlib import Path

import pytest

from mockwire.core.config import Config, config_properties


class TestConfig:
    def test_load_from_dict(self):
        config = Config({"app": {"name": "suite", "retries": 3}})
        assert config.get("app.name") == "suite"
        assert config.get("app.retries") == 3

    def test_get_with_default(self):
        assert Config({}).get("missing.key", "default") == "default"

    def test_get_through_non_dict_returns_default(self):
        config = Config({"a": "scalar"})
        assert config.get("a.b", 7) == 7

    def test_get_section(self):
        config = Config({"mockwire": {"mock": {"guard-enabled": False}}})
        assert config.get_section("mockwire.mock") == {"guard-enabled": False}
        assert config.get_section("mockwire.absent") == {}

    def test_env_var_override(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("MOCKWIRE_MOCK_GUARD_ENABLED", "false")
        config = Config({"mockwire": {"mock": {"guard-enabled": True}}})
        assert config.get("mockwire.mock.guard-enabled") == "false"

    def test_placeholder_from_config(self):
        config = Config({"base": "suite", "name": "${base}-mocks"})
        assert config.get("name") == "suite-mocks"

    def test_placeholder_default(self):
        config = Config({"name": "${MOCKWIRE_TEST_UNSET_VAR:fallback}"})
        assert config.get("name") == "fallback"

    def test_placeholder_unresolvable_raises(self):
        config = Config({"name": "${nowhere.to.be.found}"})
        with pytest.raises(ValueError, match="Cannot resolve placeholder"):
            config.get("name")

    def test_circular_placeholder_raises(self):
        config = Config({"a": "${b}", "b": "${a}"})
        with pytest.raises(ValueError, match="circular"):
            config.get("a")


class TestConfigFiles:
    def test_defaults_are_packaged(self):
        config = Config.defaults()
        assert config.get("mockwire.mock.guard-enabled") is True
        assert config.get("mockwire.logging.format") == "console"

    def test_load_yaml_file(self, tmp_path: Path):
        path = tmp_path / "mockwire.yaml"
        path.write_text("mockwire:\n  logging:\n    format: json\n")
        config = Config.from_file(path)
        assert config.get("mockwire.logging.format") == "json"
        assert config.get("mockwire.mock.track-cleanup") is True
        assert str(path) in config.loaded_sources

    def test_load_toml_file(self, tmp_path: Path):
        path = tmp_path / "mockwire.toml"
        path.write_text('[mockwire.mock]\n"guard-enabled" = false\n')
        config = Config.from_file(path, load_defaults=False)
        assert config.get("mockwire.mock.guard-enabled") is False

    def test_profile_overlay(self, tmp_path: Path):
        (tmp_path / "mockwire.yaml").write_text("mockwire:\n  logging:\n    format: console\n")
        (tmp_path / "mockwire-ci.yaml").write_text("mockwire:\n  logging:\n    format: json\n")
        config = Config.from_file(tmp_path / "mockwire.yaml", active_profiles=["ci"], load_defaults=False)
        assert config.get("mockwire.logging.format") == "json"
        assert len(config.loaded_sources) == 2

    def test_missing_file_keeps_defaults(self, tmp_path: Path):
        config = Config.from_file(tmp_path / "absent.yaml")
        assert config.get("mockwire.mock.guard-enabled") is True


class TestConfigProperties:
    def test_bind_dataclass(self):
        @config_properties(prefix="suite.runner")
        @dataclass
        class RunnerSettings:
            workers: int = 1
            strict: bool = False

        config = Config({"suite": {"runner": {"workers": 4, "strict": True}}})
        settings = config.bind(RunnerSettings)
        assert settings.workers == 4
        assert settings.strict is True

    def test_bind_coerces_env_strings(self, monkeypatch: pytest.MonkeyPatch):
        @config_properties(prefix="mockwire.runner")
        @dataclass
        class RunnerSettings:
            workers: int = 1
            fail_fast: bool = False

        monkeypatch.setenv("MOCKWIRE_RUNNER_WORKERS", "8")
        monkeypatch.setenv("MOCKWIRE_RUNNER_FAIL_FAST", "yes")
        settings = Config({}).bind(RunnerSettings)
        assert settings.workers == 8
        assert settings.fail_fast is True

    def test_bind_keeps_defaults(self):
        @config_properties(prefix="suite")
        @dataclass
        class Settings:
            workers: int = 2

        assert Config({}).bind(Settings).workers == 2

    def test_bind_undecorated_raises(self):
        @dataclass
        class Plain:
            x: int = 0

        with pytest.raises(ValueError, match="not decorated"):
            Config({}).bind(Plain)
