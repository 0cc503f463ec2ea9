"""Kernel – the immutable log Event handed to every plugin."""
from __future__ import annotations

import dataclasses
import json
from datetime import UTC, datetime
from types import MappingProxyType
from typing import Any, Mapping, Sequence

from scribe.kernel.level import Level

type MetadataValue = str | int | float | bool | None | Mapping[str, MetadataValue] | Sequence[MetadataValue]
type Metadata = Mapping[str, MetadataValue]


def freeze_metadata(value: Any) -> Any:
    """Return a deep read-only copy of *value*.

    Mappings become :class:`types.MappingProxyType` over a private copy,
    lists/tuples/sets become tuples.  Scalars are returned unchanged.
    """
    if isinstance(value, Mapping):
        return MappingProxyType({str(k): freeze_metadata(v) for k, v in value.items()})
    if isinstance(value, (list, tuple, set, frozenset)):
        return tuple(freeze_metadata(v) for v in value)
    return value


def thaw_metadata(value: Any) -> Any:
    """Inverse of :func:`freeze_metadata`: plain ``dict``/``list`` copies."""
    if isinstance(value, Mapping):
        return {k: thaw_metadata(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [thaw_metadata(v) for v in value]
    return value


@dataclasses.dataclass(frozen=True)
class Event:
    """One log occurrence.

    Built once per ``log`` call and shared, unchanged, by every plugin.
    ``metadata`` is deep-frozen on construction so neither plugins nor the
    caller (through the dict it passed in) can change what others observe.
    """

    level: Level
    message: str
    metadata: Metadata | None = None
    source: str | None = None
    timestamp: datetime = dataclasses.field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        if not isinstance(self.level, Level):
            object.__setattr__(self, "level", Level.parse(self.level))
        if not isinstance(self.message, str):
            object.__setattr__(self, "message", str(self.message))
        if self.metadata is not None:
            object.__setattr__(self, "metadata", freeze_metadata(self.metadata))

    def __hash__(self) -> int:
        # metadata proxies are unhashable; equal events still hash equal
        return hash((self.level, self.message, self.source, self.timestamp))

    def metadata_dict(self) -> dict[str, Any]:
        """Mutable deep copy of the metadata (``{}`` when absent)."""
        if self.metadata is None:
            return {}
        return thaw_metadata(self.metadata)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "level": self.level.value,
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
        }
        if self.metadata is not None:
            payload["metadata"] = self.metadata_dict()
        if self.source is not None:
            payload["source"] = self.source
        return payload

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), default=str)


__all__ = ["Event", "Metadata", "MetadataValue", "freeze_metadata", "thaw_metadata"]
