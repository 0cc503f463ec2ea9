"""Config validation – errors raised while building ScribeSettings."""
from __future__ import annotations

from scribe.kernel.errors import ScribeError


class ConfigError(ScribeError):
    """Settings could not be loaded or failed validation."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A field without a default has no value (e.g. ``SCRIBE_LABEL`` unset)."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        self.setting_name = setting_name
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            detail={"setting": setting_name},
        )


class InvalidSettingValueError(ConfigError):
    """A field has a value outside its allowed set."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        self.setting_name = setting_name
        self.value = value
        self.reason = reason
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
