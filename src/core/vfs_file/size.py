"""vfs.file.size: byte length or newline count of a single file."""
from __future__ import annotations

from typing import Optional, Sequence

from common.errors import (
    InvalidMode,
    InvalidParameterCount,
    InvalidPath,
    OpenError,
    ReadError,
    StatError,
)
from common.models import SizeMode

from .filesystem import DEFAULT_FILESYSTEM, FileSystem

LINE_COUNT_CHUNK_SIZE = 64 * 1024
NEWLINE = b"\n"


class LineCounter:
    """Counts newline bytes without materializing the entire file.

    Only raw ``\\n`` bytes are counted, so a trailing line without a
    terminator does not add to the result.
    """

    def __init__(
        self,
        filesystem: Optional[FileSystem] = None,
        *,
        chunk_size: int = LINE_COUNT_CHUNK_SIZE,
    ) -> None:
        self.filesystem = filesystem or DEFAULT_FILESYSTEM
        self.chunk_size = max(1, chunk_size)

    def count(self, path: str) -> int:
        try:
            handle = self.filesystem.open(path)
        except (OSError, ValueError) as exc:
            raise OpenError(path, exc) from exc

        line_count = 0
        with handle:
            while True:
                try:
                    chunk = handle.read(self.chunk_size)
                except (OSError, ValueError) as exc:
                    raise ReadError(path, exc) from exc
                if not chunk:
                    return line_count
                line_count += chunk.count(NEWLINE)


def export_size(params: Sequence[str], filesystem: Optional[FileSystem] = None) -> int:
    """Return the file size in bytes, or its newline count for mode ``lines``.

    ``params`` is ``[path]`` or ``[path, mode]``; an empty mode means bytes.
    """

    if len(params) == 0 or len(params) > 2:
        raise InvalidParameterCount(len(params))
    path = params[0]
    if not path:
        raise InvalidPath()
    mode = SizeMode.BYTES.value
    if len(params) == 2 and params[1]:
        mode = params[1]

    fs = filesystem or DEFAULT_FILESYSTEM
    if mode == SizeMode.BYTES.value:
        try:
            return fs.stat(path).st_size
        except (OSError, ValueError) as exc:
            raise StatError(path, exc) from exc
    if mode == SizeMode.LINES.value:
        return LineCounter(fs).count(path)
    raise InvalidMode(mode)
