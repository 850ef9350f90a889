"""Agent-facing plugin exporting the vfs.file metrics."""
from __future__ import annotations

from typing import Callable, Dict, List, Optional, Sequence

from common.errors import UnsupportedMetric
from common.models import MetricDescriptor

from .filesystem import DEFAULT_FILESYSTEM, FileSystem
from .size import export_size

PLUGIN_NAME = "VFSFile"

Handler = Callable[[Sequence[str], FileSystem], int]

_METRICS: Dict[str, tuple[str, Handler]] = {
    "vfs.file.size": ("Returns file size.", export_size),
}


class FilePlugin:
    """Dispatches metric keys to their handlers. Holds no per-call state."""

    name = PLUGIN_NAME

    def __init__(self, filesystem: Optional[FileSystem] = None) -> None:
        self.filesystem = filesystem or DEFAULT_FILESYSTEM

    def metrics(self) -> List[MetricDescriptor]:
        return [MetricDescriptor(key, description) for key, (description, _) in _METRICS.items()]

    def export(self, key: str, params: Sequence[str]) -> int:
        try:
            _, handler = _METRICS[key]
        except KeyError as exc:
            raise UnsupportedMetric(key) from exc
        return handler(params, self.filesystem)
