"""Configuration — moderation settings loaded from YAML.

The file holds a top-level ``moderation`` mapping::

    moderation:
      strictness: moderate
      allow_sensitive_topics: true
      cache_enabled: true
      min_length: 5
      max_length: 125

Missing keys fall back to defaults and unknown keys are ignored.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from prayerwall.moderation.content_filter import ContentFilter
from prayerwall.moderation.models import FilterOptions, Strictness
from prayerwall.validation.validator import DEFAULT_MAX_LENGTH, DEFAULT_MIN_LENGTH, PrayerValidator

CONFIG_ENV_VAR = "PRAYERWALL_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".prayerwall" / "config.yaml"


class ConfigError(ValueError):
    """Raised when a configuration file holds invalid settings."""


@dataclass
class ModerationSettings:
    """Everything needed to wire a filter and validator."""

    strictness: Strictness = Strictness.MODERATE
    allow_sensitive_topics: bool = True
    cache_enabled: bool = True
    min_length: int = DEFAULT_MIN_LENGTH
    max_length: int = DEFAULT_MAX_LENGTH

    def to_filter_options(self) -> FilterOptions:
        return FilterOptions(
            strictness=self.strictness,
            allow_sensitive_topics=self.allow_sensitive_topics,
            cache_enabled=self.cache_enabled,
        )


def default_config_path() -> Path:
    env = os.environ.get(CONFIG_ENV_VAR)
    return Path(env) if env else DEFAULT_CONFIG_PATH


def load_settings(path: str | Path | None = None) -> ModerationSettings:
    """Load moderation settings from *path* (or the default location).

    A missing file yields the defaults. Malformed YAML or invalid values
    raise ConfigError.
    """
    config_path = Path(path) if path else default_config_path()
    if not config_path.exists():
        return ModerationSettings()

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at the top of {config_path}")
    return parse_settings(data.get("moderation") or {})


def parse_settings(section: dict) -> ModerationSettings:
    """Build ModerationSettings from a ``moderation`` mapping."""
    if not isinstance(section, dict):
        raise ConfigError("'moderation' must be a mapping")

    defaults = ModerationSettings()
    try:
        strictness = Strictness(section.get("strictness", defaults.strictness.value))
    except ValueError as e:
        valid = ", ".join(s.value for s in Strictness)
        raise ConfigError(f"Invalid strictness. Must be one of: {valid}") from e

    settings = ModerationSettings(
        strictness=strictness,
        allow_sensitive_topics=_bool(section, "allow_sensitive_topics", defaults.allow_sensitive_topics),
        cache_enabled=_bool(section, "cache_enabled", defaults.cache_enabled),
        min_length=_int(section, "min_length", defaults.min_length),
        max_length=_int(section, "max_length", defaults.max_length),
    )
    if settings.min_length < 1 or settings.max_length < 1:
        raise ConfigError("min_length and max_length must be positive")
    if settings.min_length > settings.max_length:
        raise ConfigError(
            f"min_length ({settings.min_length}) exceeds max_length ({settings.max_length})"
        )
    return settings


def _bool(section: dict, key: str, default: bool) -> bool:
    value = section.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"'{key}' must be true or false")
    return value


def _int(section: dict, key: str, default: int) -> int:
    value = section.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"'{key}' must be an integer")
    return value


def build_filter(settings: ModerationSettings | None = None) -> ContentFilter:
    return ContentFilter((settings or ModerationSettings()).to_filter_options())


def build_validator(
    settings: ModerationSettings | None = None, engine: ContentFilter | None = None
) -> PrayerValidator:
    settings = settings or ModerationSettings()
    return PrayerValidator(
        engine or build_filter(settings),
        min_length=settings.min_length,
        max_length=settings.max_length,
    )
