"""Config – settings, loaders and validation errors."""
from scribe.config.settings import EnvSettingsLoader, ScribeSettings, Settings, SettingsLoader
from scribe.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "ScribeSettings",
    "Settings",
    "SettingsLoader",
]
