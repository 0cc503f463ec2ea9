"""Core – dispatcher and completion handle."""
from scribe.core.dispatcher import Scribe
from scribe.core.handle import DispatchHandle

__all__ = ["DispatchHandle", "Scribe"]
