"""
scribe – structured logging with asynchronous plugin fan-out.

Import path convention::

    from scribe import Scribe, Level
    from scribe.plugins import FilePlugin, URLPlugin
    from scribe.kernel.errors import PluginError
    from scribe.config import EnvSettingsLoader, ScribeSettings
"""

from scribe.config import ScribeSettings
from scribe.core import DispatchHandle, Scribe
from scribe.kernel import Event, FailurePolicy, Level, Plugin

__version__ = "0.1.0"
__all__ = [
    "DispatchHandle",
    "Event",
    "FailurePolicy",
    "Level",
    "Plugin",
    "Scribe",
    "ScribeSettings",
    "__version__",
]
