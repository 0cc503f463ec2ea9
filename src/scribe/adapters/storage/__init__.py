"""Storage adapter – line-file persistence for the file sink."""
from scribe.adapters.storage.store import FileStore, LocalFileStore

__all__ = ["FileStore", "LocalFileStore"]
