from __future__ import annotations

import json
from pathlib import Path

from common.events import MetricEventLogger
from common.models import MetricOutcome


def test_emit_appends_jsonl_records(tmp_path: Path) -> None:
    log_path = tmp_path / "nested" / "events.jsonl"
    logger = MetricEventLogger(log_path)
    logger.emit(MetricOutcome(key="vfs.file.size", params=["/a"], value=10))
    logger.emit(
        MetricOutcome(
            key="vfs.file.size",
            params=["/b", "lines"],
            error_code="IO_ERROR",
            error_message="Invalid first parameter: No such file or directory: '/b'",
        )
    )

    records = [json.loads(line) for line in log_path.read_text(encoding="utf-8").splitlines()]
    assert [r["value"] for r in records] == [10, None]
    assert records[1]["error_code"] == "IO_ERROR"
    assert records[1]["params"] == ["/b", "lines"]
    assert all("timestamp" in r for r in records)


def test_emit_without_path_is_noop(tmp_path: Path) -> None:
    MetricEventLogger(None).emit(MetricOutcome(key="vfs.file.size", value=1))
    assert list(tmp_path.iterdir()) == []
