from __future__ import annotations

from pathlib import Path

import pytest

from common.errors import ErrorCode, InvalidParameterCount, UnsupportedMetric
from common.models import MetricDescriptor
from core.vfs_file import PLUGIN_NAME, FilePlugin


def test_plugin_exports_size_metric() -> None:
    plugin = FilePlugin()
    assert plugin.name == PLUGIN_NAME
    assert plugin.metrics() == [MetricDescriptor("vfs.file.size", "Returns file size.")]


def test_export_dispatches_to_size_handler(tmp_path: Path) -> None:
    path = tmp_path / "log.txt"
    path.write_bytes(b"x\ny\n")
    plugin = FilePlugin()
    assert plugin.export("vfs.file.size", [str(path)]) == 4
    assert plugin.export("vfs.file.size", [str(path), "lines"]) == 2


def test_export_propagates_handler_errors() -> None:
    with pytest.raises(InvalidParameterCount):
        FilePlugin().export("vfs.file.size", [])


def test_unknown_key_is_unsupported() -> None:
    with pytest.raises(UnsupportedMetric) as exc:
        FilePlugin().export("vfs.file.contents", ["/etc/hosts"])
    assert exc.value.code == ErrorCode.UNSUPPORTED
    assert exc.value.message == "Unsupported metric."
