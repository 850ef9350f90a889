from __future__ import annotations

import json
from pathlib import Path

import pytest

from common import config as config_module
from ui import cli


@pytest.fixture(autouse=True)
def _isolated_defaults(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr(config_module, "DEFAULT_CONFIG_PATH", tmp_path / "no-defaults.json")


def test_test_command_prints_value(tmp_path: Path, capsys) -> None:
    path = tmp_path / "ten.bin"
    path.write_bytes(b"0123456789")
    key = f"vfs.file.size[{path}]"

    assert cli.main(["test", key]) == cli.EXIT_OK
    out = capsys.readouterr().out.rstrip("\n")
    assert out.startswith(key)
    assert out.endswith("[u|10]")


def test_test_command_reports_metric_error(tmp_path: Path, capsys) -> None:
    key = f"vfs.file.size[{tmp_path / 'missing'},lines]"

    assert cli.main(["test", key]) == cli.EXIT_METRIC_ERROR
    out = capsys.readouterr().out
    assert "[m|NOTSUPPORTED] [Invalid first parameter: " in out


def test_test_command_rejects_bad_key(capsys) -> None:
    assert cli.main(["test", "vfs.file.size[/tmp/a"]) == cli.EXIT_USAGE_ERROR
    assert "missing closing bracket" in capsys.readouterr().out


def test_unsupported_key(capsys) -> None:
    assert cli.main(["test", "vfs.file.md5sum[/etc/hosts]"]) == cli.EXIT_METRIC_ERROR
    assert "[Unsupported metric.]" in capsys.readouterr().out


def test_json_output_and_event_log(tmp_path: Path, capsys) -> None:
    path = tmp_path / "lines.txt"
    path.write_bytes(b"a\nb\nc")
    event_log = tmp_path / "events" / "metrics.jsonl"

    status = cli.main(
        [
            "--format",
            "json",
            "--event-log",
            str(event_log),
            "test",
            f"vfs.file.size[{path},lines]",
        ]
    )

    assert status == cli.EXIT_OK
    printed = json.loads(capsys.readouterr().out)
    assert printed["value"] == 2
    assert printed["params"] == [str(path), "lines"]
    logged = json.loads(event_log.read_text(encoding="utf-8"))
    assert logged["value"] == 2
    assert logged["error_message"] is None


def test_unwritable_event_log_reported(tmp_path: Path, capsys) -> None:
    path = tmp_path / "ten.bin"
    path.write_bytes(b"0123456789")
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")

    status = cli.main(["--event-log", str(blocker / "log.jsonl"), "test", f"vfs.file.size[{path}]"])

    assert status == cli.EXIT_USAGE_ERROR
    out = capsys.readouterr().out
    assert "[u|10]" in out
    assert "[event-log]" in out


def test_print_lists_metrics(capsys) -> None:
    assert cli.main(["print"]) == cli.EXIT_OK
    out = capsys.readouterr().out
    assert "vfs.file.size" in out
    assert "Returns file size." in out


def test_bad_config_reported(tmp_path: Path, capsys) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"version": 1, "global": {"output_format": "yaml"}}), encoding="utf-8")
    assert cli.main(["--config", str(config_path), "print"]) == cli.EXIT_USAGE_ERROR
    assert "[config]" in capsys.readouterr().out


def test_no_command_prints_help(capsys) -> None:
    assert cli.main([]) == cli.EXIT_USAGE_ERROR
    assert "usage" in capsys.readouterr().out.lower()
