"""Tests for YAML moderation settings."""

import tempfile
from pathlib import Path

import pytest
import yaml

from prayerwall.config import (
    CONFIG_ENV_VAR,
    ConfigError,
    ModerationSettings,
    build_filter,
    build_validator,
    load_settings,
)
from prayerwall.moderation.models import Strictness


def _write_config(data) -> str:
    """Write *data* to a temporary YAML file and return the path."""
    f = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False)
    yaml.dump(data, f)
    f.close()
    return f.name


def test_missing_file_uses_defaults():
    with tempfile.TemporaryDirectory() as tmpdir:
        settings = load_settings(Path(tmpdir) / "nope.yaml")
    assert settings == ModerationSettings()


def test_load_full_settings():
    path = _write_config({
        "moderation": {
            "strictness": "strict",
            "allow_sensitive_topics": False,
            "cache_enabled": False,
            "min_length": 10,
            "max_length": 200,
        }
    })
    settings = load_settings(path)
    assert settings.strictness == Strictness.STRICT
    assert settings.allow_sensitive_topics is False
    assert settings.cache_enabled is False
    assert settings.min_length == 10
    assert settings.max_length == 200


def test_partial_settings_and_unknown_keys():
    path = _write_config({"moderation": {"max_length": 300, "theme": "dark"}, "api": {}})
    settings = load_settings(path)
    assert settings.max_length == 300
    assert settings.min_length == 5
    assert settings.strictness == Strictness.MODERATE


def test_empty_file():
    path = _write_config(None)
    assert load_settings(path) == ModerationSettings()


def test_env_var_location(monkeypatch):
    path = _write_config({"moderation": {"min_length": 8}})
    monkeypatch.setenv(CONFIG_ENV_VAR, path)
    assert load_settings().min_length == 8


def test_invalid_strictness():
    path = _write_config({"moderation": {"strictness": "paranoid"}})
    with pytest.raises(ConfigError, match="strictness"):
        load_settings(path)


def test_min_exceeds_max():
    path = _write_config({"moderation": {"min_length": 50, "max_length": 20}})
    with pytest.raises(ConfigError, match="exceeds"):
        load_settings(path)


def test_wrong_types():
    for section in ({"cache_enabled": "yes"}, {"min_length": "5"}, {"max_length": True}, {"min_length": 0}):
        with pytest.raises(ConfigError):
            load_settings(_write_config({"moderation": section}))


def test_invalid_yaml():
    f = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False)
    f.write("moderation: [unclosed\n")
    f.close()
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_settings(f.name)


def test_top_level_must_be_mapping():
    with pytest.raises(ConfigError):
        load_settings(_write_config(["a", "b"]))


def test_build_filter_and_validator():
    settings = ModerationSettings(cache_enabled=False, allow_sensitive_topics=False, max_length=60)
    engine = build_filter(settings)
    assert engine.cache_enabled is False
    assert engine.options.allow_sensitive_topics is False

    validator = build_validator(settings)
    assert validator.max_length == 60
    assert validator.engine.cache_enabled is False

    shared = build_validator(settings, engine=engine)
    assert shared.engine is engine
