"""Config settings – 12-factor env-based configuration."""
from scribe.config.settings.base import LOG_FORMATS, ScribeSettings, Settings
from scribe.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "LOG_FORMATS", "ScribeSettings", "Settings", "SettingsLoader"]
