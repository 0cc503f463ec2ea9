"""Plugins – bundled file and URL sinks."""
from scribe.plugins.file import FilePlugin
from scribe.plugins.url import DEFAULT_HEADERS, URLPlugin

__all__ = ["DEFAULT_HEADERS", "FilePlugin", "URLPlugin"]
