"""Testing fakes – in-memory doubles for plugins and sink collaborators."""
from scribe.testing.fakes.collaborators import InMemoryFileStore, RecordingTransport
from scribe.testing.fakes.plugins import CountingPlugin, FailingPlugin, RecordingPlugin

__all__ = [
    "CountingPlugin",
    "FailingPlugin",
    "InMemoryFileStore",
    "RecordingPlugin",
    "RecordingTransport",
]
