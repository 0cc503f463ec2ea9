"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    ScribeError
    ├── PluginError              (plugin.py)
    │   └── FormatterError
    ├── DispatchError
    └── InfrastructureError      (infrastructure.py)
        ├── StorageError
        │   └── StorageNotFoundError
        ├── TimeoutError
        └── ExternalServiceError

Configuration errors live in :mod:`scribe.config.validation`.
"""

from scribe.kernel.errors.base import ScribeError
from scribe.kernel.errors.infrastructure import (
    ExternalServiceError,
    InfrastructureError,
    StorageError,
    StorageNotFoundError,
    TimeoutError,
)
from scribe.kernel.errors.plugin import DispatchError, FormatterError, PluginError

__all__ = [
    "DispatchError",
    "ExternalServiceError",
    "FormatterError",
    "InfrastructureError",
    "PluginError",
    "ScribeError",
    "StorageError",
    "StorageNotFoundError",
    "TimeoutError",
]
