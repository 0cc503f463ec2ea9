"""Kernel – log severity levels."""
from __future__ import annotations

from enum import Enum


class Level(str, Enum):
    """Severity of a log event, totally ordered from ``TRACE`` to ``CRITICAL``.

    Values are the lower-case level names so a ``Level`` serialises as a
    plain string.  Ordering follows severity, not the string value::

        Level.DEBUG < Level.ERROR      # True
        max(Level.INFO, Level.NOTICE)  # Level.NOTICE
    """

    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    NOTICE = "notice"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"

    @property
    def severity(self) -> int:
        """Integer rank, ``0`` for trace up to ``6`` for critical."""
        return _SEVERITY[self]

    @property
    def stdlib_method(self) -> str:
        """Name of the text-logger method that renders this level."""
        return _STDLIB_METHOD.get(self, self.value)

    @classmethod
    def parse(cls, value: Level | str) -> Level:
        """Return the :class:`Level` for *value* (case-insensitive name).

        Raises
        ------
        ValueError
            When *value* names no known level.
        """
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        name = _ALIASES.get(name, name)
        try:
            return cls(name)
        except ValueError:
            raise ValueError(
                f"Unknown log level {value!r}; expected one of {[lvl.value for lvl in cls]}"
            ) from None

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.severity < other.severity

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.severity <= other.severity

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.severity > other.severity

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.severity >= other.severity

    def __str__(self) -> str:
        return self.value


_SEVERITY: dict[Level, int] = {level: rank for rank, level in enumerate(Level)}

# structlog / stdlib have no trace or notice methods
_STDLIB_METHOD: dict[Level, str] = {
    Level.TRACE: "debug",
    Level.NOTICE: "info",
}

_ALIASES: dict[str, str] = {"warn": "warning", "fatal": "critical"}


__all__ = ["Level"]
