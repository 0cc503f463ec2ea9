"""Kernel – how a completion handle reports plugin failures."""
from __future__ import annotations

from enum import Enum


class FailurePolicy(str, Enum):
    """Failure reporting for one dispatch.

    Both policies wait for every plugin to finish; they differ only in what
    the awaited handle raises.

    * ``FIRST`` – re-raise the first failure in plugin registration order,
      unchanged.
    * ``COLLECT`` – raise :class:`~scribe.kernel.errors.DispatchError`
      carrying every failure.
    """

    FIRST = "first"
    COLLECT = "collect"


__all__ = ["FailurePolicy"]
