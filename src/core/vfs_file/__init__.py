"""File metrics exported to the monitoring agent."""

from .filesystem import DEFAULT_FILESYSTEM, FileSystem, OsFileSystem
from .plugin import PLUGIN_NAME, FilePlugin
from .size import LINE_COUNT_CHUNK_SIZE, LineCounter, export_size

__all__ = [
    "DEFAULT_FILESYSTEM",
    "FilePlugin",
    "FileSystem",
    "LINE_COUNT_CHUNK_SIZE",
    "LineCounter",
    "OsFileSystem",
    "PLUGIN_NAME",
    "export_size",
]
