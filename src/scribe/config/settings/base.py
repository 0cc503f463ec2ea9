"""Config settings – Settings base class and ScribeSettings."""
from __future__ import annotations

import dataclasses
from typing import Any, Callable, ClassVar, Mapping

from scribe.config.validation import InvalidSettingValueError
from scribe.kernel.level import Level
from scribe.kernel.policy import FailurePolicy


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


LOG_FORMATS = frozenset({"json", "console"})


@dataclasses.dataclass
class ScribeSettings(Settings):
    """Configuration for a :class:`~scribe.core.dispatcher.Scribe`.

    Parameters
    ----------
    label:
        Identifies the scribe; used as the text-logger name.
    log_level:
        Minimum level rendered by :func:`~scribe.observability.logging.configure_logging`.
    log_format:
        ``"json"`` or ``"console"`` renderer for the text logger.
    failure_policy:
        ``"first"`` or ``"collect"``, see :class:`~scribe.kernel.policy.FailurePolicy`.
    handler_factory:
        ``label -> logger`` override for the text logger.  Not env-loadable.
    metadata_provider:
        Zero-argument callable returning ambient metadata merged into every
        rendered line.  Not env-loadable.
    """

    _prefix: ClassVar[str] = "SCRIBE"
    _env_ignore: ClassVar[frozenset[str]] = frozenset({"handler_factory", "metadata_provider"})

    label: str
    log_level: str = "INFO"
    log_format: str = "json"
    failure_policy: str = FailurePolicy.FIRST.value
    handler_factory: Callable[[str], Any] | None = None
    metadata_provider: Callable[[], Mapping[str, Any]] | None = None

    def _validate(self) -> None:
        if not self.label:
            raise InvalidSettingValueError("label", self.label, "must be a non-empty string")
        try:
            Level.parse(self.log_level)
        except ValueError as exc:
            raise InvalidSettingValueError("log_level", self.log_level, str(exc)) from exc
        if self.log_format not in LOG_FORMATS:
            raise InvalidSettingValueError(
                "log_format", self.log_format, f"expected one of {sorted(LOG_FORMATS)}"
            )
        try:
            FailurePolicy(self.failure_policy)
        except ValueError as exc:
            raise InvalidSettingValueError(
                "failure_policy",
                self.failure_policy,
                f"expected one of {[p.value for p in FailurePolicy]}",
            ) from exc


__all__ = ["LOG_FORMATS", "ScribeSettings", "Settings"]
