"""Observability – structlog configuration for the text-logger collaborator."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from scribe.config.settings import LOG_FORMATS, ScribeSettings
from scribe.kernel.level import Level

# scribe levels without a stdlib method render through the nearest one
_STDLIB_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

_MANAGED_ATTR = "_scribe_managed"


def stdlib_level(level: Level | str) -> int:
    """Return the :mod:`logging` level that renders *level*."""
    return _STDLIB_LEVELS[Level.parse(level).stdlib_method]


class JsonLoggerFactory:
    """Configure structlog to render through the stdlib root logger."""

    @staticmethod
    def configure(level: Level | str = Level.INFO, fmt: str = "json") -> None:
        """Install a structlog pipeline and a managed root handler.

        Parameters
        ----------
        level:
            Minimum scribe level to render.
        fmt:
            ``"json"`` for one JSON object per line, ``"console"`` for the
            structlog dev renderer.
        """
        if fmt not in LOG_FORMATS:
            raise ValueError(f"Unknown log format {fmt!r}; expected one of {sorted(LOG_FORMATS)}")

        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        renderer: Any = (
            structlog.dev.ConsoleRenderer() if fmt == "console" else structlog.processors.JSONRenderer()
        )

        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        setattr(handler, _MANAGED_ATTR, True)

        # replace only our own handler; keep pytest caplog and other external handlers
        root = logging.getLogger()
        root.handlers = [h for h in root.handlers if not getattr(h, _MANAGED_ATTR, False)]
        root.addHandler(handler)
        root.setLevel(stdlib_level(level))

    @classmethod
    def from_settings(cls, settings: ScribeSettings) -> None:
        cls.configure(level=settings.log_level, fmt=settings.log_format)


def configure_logging(level: Level | str = Level.INFO, fmt: str = "json") -> None:
    """Shortcut for :meth:`JsonLoggerFactory.configure`."""
    JsonLoggerFactory.configure(level=level, fmt=fmt)


__all__ = ["JsonLoggerFactory", "configure_logging", "stdlib_level"]
