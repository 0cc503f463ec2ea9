"""Config settings – SettingsLoader port and EnvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, Mapping, TypeVar

from scribe.config.settings.base import Settings
from scribe.config.validation import ConfigError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)

_TRUTHY = frozenset({"1", "true", "yes", "on"})


class SettingsLoader(abc.ABC):
    """Port: build a settings instance from some external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T], **overrides: Any) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from environment variables.

    Field ``log_level`` of a class with ``_prefix = "SCRIBE"`` is read from
    ``SCRIBE_LOG_LEVEL``.  Fields named in the class's ``_env_ignore`` are
    never read from the environment.  Keyword *overrides* win over the
    environment, which is how callables such as ``metadata_provider`` are
    supplied::

        settings = EnvSettingsLoader().load(ScribeSettings, metadata_provider=ambient)

    Parameters
    ----------
    environ:
        Mapping to read instead of :data:`os.environ`.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T], **overrides: Any) -> T:
        environ = os.environ if self._environ is None else self._environ
        ignored: frozenset[str] = getattr(settings_class, "_env_ignore", frozenset())
        values: dict[str, Any] = {}

        for fld in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            if fld.name in overrides:
                values[fld.name] = overrides[fld.name]
                continue
            if fld.name in ignored:
                continue
            key = self.env_key(settings_class, fld.name)
            if key in environ:
                values[fld.name] = self._coerce(environ[key], fld.type)
            elif _is_required(fld):
                raise MissingRequiredSettingError(key)

        try:
            return settings_class(**values)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Could not build {settings_class.__name__}: {exc}", cause=exc) from exc

    @staticmethod
    def env_key(settings_class: type[Settings], field_name: str) -> str:
        """Environment variable name for *field_name*."""
        prefix = getattr(settings_class, "_prefix", "")
        return f"{prefix}_{field_name}".upper().lstrip("_")

    def _coerce(self, value: str, type_hint: Any) -> Any:
        # string annotations under postponed evaluation compare by name
        name = type_hint if isinstance(type_hint, str) else getattr(type_hint, "__name__", "")
        if name == "bool":
            return value.strip().lower() in _TRUTHY
        if name == "int":
            return int(value)
        if name == "float":
            return float(value)
        if getattr(type_hint, "__origin__", None) is list or str(type_hint).startswith("list["):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value


def _is_required(fld: dataclasses.Field[Any]) -> bool:
    return fld.default is dataclasses.MISSING and fld.default_factory is dataclasses.MISSING


__all__ = ["EnvSettingsLoader", "SettingsLoader"]
