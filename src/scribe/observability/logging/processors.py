"""Observability – get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    This is the default ``handler_factory`` of a
    :class:`~scribe.core.dispatcher.Scribe`: it is called with the scribe's
    label and receives every event as a rendered line.

    Parameters
    ----------
    name:
        Logger name (a scribe label, or ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["get_logger"]
