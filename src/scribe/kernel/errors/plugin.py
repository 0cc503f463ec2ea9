"""Plugin and dispatch errors – failures scoped to one fan-out."""

from __future__ import annotations

from typing import Any, Sequence

from scribe.kernel.errors.base import ScribeError


class PluginError(ScribeError):
    """A plugin could not process an event."""

    default_code = "plugin_error"

    def __init__(
        self,
        message: str,
        *,
        plugin: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.plugin = plugin


class FormatterError(PluginError):
    """A plugin's formatter raised while rendering an event."""

    default_code = "formatter_error"


class DispatchError(ScribeError):
    """One or more plugins failed during a single dispatch.

    Raised by a completion handle under the ``collect`` failure policy.
    ``failures`` keeps ``(plugin, exception)`` pairs in registration order;
    ``errors`` is just the exceptions.
    """

    default_code = "dispatch_error"

    def __init__(self, failures: Sequence[tuple[Any, BaseException]]) -> None:
        self.failures: list[tuple[Any, BaseException]] = list(failures)
        names = [_plugin_name(plugin) for plugin, _ in self.failures]
        super().__init__(
            f"{len(self.failures)} plugin(s) failed: {', '.join(names)}",
            detail={"plugins": names},
            cause=self.failures[0][1] if self.failures else None,
        )

    @property
    def errors(self) -> list[BaseException]:
        return [exc for _, exc in self.failures]


def _plugin_name(plugin: Any) -> str:
    return getattr(plugin, "name", None) or type(plugin).__name__


__all__ = ["DispatchError", "FormatterError", "PluginError"]
