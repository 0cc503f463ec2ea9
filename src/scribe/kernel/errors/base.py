"""Kernel errors – ScribeError, root of the scribe error hierarchy."""

from __future__ import annotations

import json
from typing import Any, Self


class ScribeError(Exception):
    """Base for every error raised by scribe or its bundled plugins.

    Parameters
    ----------
    message:
        Human-readable description.
    code:
        Stable slug for programmatic matching; ``default_code`` if omitted.
    detail:
        JSON-friendly context (plugin names, paths, setting names).
    cause:
        Underlying exception; also set as ``__cause__``.

    ``str(error)`` is a single JSON line so a failure surfaced through a
    dispatch handle can be logged through the same scribe that produced it.
    """

    default_code: str = "scribe_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail) if detail else {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    @classmethod
    def wrap(cls, exc: BaseException, message: str, **kwargs: Any) -> Self:
        """Return *exc* if it already is a ``cls``, else a new ``cls`` caused by it."""
        if isinstance(exc, cls):
            return exc
        return cls(message, cause=exc, **kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Metadata-shaped form: ``error``, ``code``, ``message``, then ``detail``/``cause`` when set."""
        data: dict[str, Any] = {
            "error": type(self).__name__,
            "code": self.code,
            "message": self.message,
        }
        if self.detail:
            data["detail"] = self.detail
        if self.cause is not None:
            data["cause"] = repr(self.cause)
        return data

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


__all__ = ["ScribeError"]
