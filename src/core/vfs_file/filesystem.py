"""Filesystem access used by the vfs.file metrics."""
from __future__ import annotations

import os
from typing import Protocol


class BinaryReader(Protocol):
    def read(self, size: int = -1) -> bytes: ...

    def close(self) -> None: ...

    def __enter__(self) -> "BinaryReader": ...

    def __exit__(self, exc_type, exc, tb) -> None: ...


class FileSystem(Protocol):
    def stat(self, path: str) -> os.stat_result: ...

    def open(self, path: str) -> BinaryReader: ...


class DescriptorReader:
    """Raw reads over an OS file descriptor.

    Unlike the built-in ``open``, a directory opens fine here and only the
    first read fails (EISDIR).
    """

    def __init__(self, fd: int) -> None:
        self.fd = fd
        self.closed = False

    def read(self, size: int = -1) -> bytes:
        if size < 0:
            chunks = []
            while True:
                chunk = os.read(self.fd, 64 * 1024)
                if not chunk:
                    return b"".join(chunks)
                chunks.append(chunk)
        return os.read(self.fd, size)

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        os.close(self.fd)

    def __enter__(self) -> "DescriptorReader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class OsFileSystem:
    """Read-only view of the local filesystem."""

    def stat(self, path: str) -> os.stat_result:
        return os.stat(path)

    def open(self, path: str) -> DescriptorReader:
        flags = os.O_RDONLY | getattr(os, "O_BINARY", 0)
        return DescriptorReader(os.open(path, flags))


DEFAULT_FILESYSTEM = OsFileSystem()
