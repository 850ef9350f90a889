"""CLI shell for testing agent metric keys."""
from __future__ import annotations

import argparse
import json
import time
from pathlib import Path
from typing import Any, Dict, List, Sequence

from common.config import load_runtime_config
from common.errors import BackendError, ItemKeyError, MetricError
from common.events import MetricEventLogger
from common.itemkey import parse_item_key
from common.models import MetricOutcome, RuntimeConfig
from core.vfs_file import FilePlugin

KEY_COLUMN_WIDTH = 46

EXIT_OK = 0
EXIT_METRIC_ERROR = 1
EXIT_USAGE_ERROR = 2


def run_metric(plugin: FilePlugin, key: str, params: Sequence[str]) -> MetricOutcome:
    outcome = MetricOutcome(key=key, params=list(params))
    start = time.perf_counter()
    try:
        outcome.value = plugin.export(key, params)
    except MetricError as exc:
        outcome.error_code = exc.code.value
        outcome.error_message = exc.message
    outcome.duration_ms = (time.perf_counter() - start) * 1000.0
    return outcome


def render_outcome(item_key: str, outcome: MetricOutcome, output_format: str) -> str:
    if output_format == "json":
        return json.dumps(outcome.to_dict())
    if outcome.ok:
        return f"{item_key:<{KEY_COLUMN_WIDTH}}[u|{outcome.value}]"
    return f"{item_key:<{KEY_COLUMN_WIDTH}}[m|NOTSUPPORTED] [{outcome.error_message}]"


def command_test(args: argparse.Namespace, runtime: RuntimeConfig) -> int:
    output_format = runtime.global_settings.output_format
    try:
        key, params = parse_item_key(args.key)
    except ItemKeyError as exc:
        print(f"[test] {exc.message}")
        return EXIT_USAGE_ERROR

    outcome = run_metric(FilePlugin(), key, params)
    print(render_outcome(args.key, outcome, output_format))
    event_log = runtime.global_settings.event_log
    try:
        MetricEventLogger(Path(event_log) if event_log else None).emit(outcome)
    except OSError as exc:
        print(f"[event-log] cannot write '{event_log}': {exc}")
        return EXIT_USAGE_ERROR
    return EXIT_OK if outcome.ok else EXIT_METRIC_ERROR


def command_print(args: argparse.Namespace, runtime: RuntimeConfig) -> int:
    plugin = FilePlugin()
    for descriptor in plugin.metrics():
        if runtime.global_settings.output_format == "json":
            print(json.dumps({"plugin": plugin.name, "key": descriptor.key, "description": descriptor.description}))
        else:
            print(f"{descriptor.key:<{KEY_COLUMN_WIDTH}}{descriptor.description}")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Agent file metrics (vfs.file.size)")
    parser.add_argument("--config", help="Path to a JSON runtime config (default: config/defaults.json)")
    parser.add_argument("--event-log", help="Append a JSONL record for every metric call to this file")
    parser.add_argument(
        "--format",
        choices=["plain", "json"],
        help="Output format (overrides the config value)",
    )

    subparsers = parser.add_subparsers(dest="command")

    test = subparsers.add_parser("test", help="Evaluate a single item key, e.g. vfs.file.size[/etc/hosts,lines]")
    test.add_argument("key", help="Item key to evaluate")
    test.set_defaults(func=command_test)

    show = subparsers.add_parser("print", help="List supported metric keys")
    show.set_defaults(func=command_print)

    return parser


def build_overrides(args: argparse.Namespace) -> Dict[str, Dict[str, Any]]:
    overrides: Dict[str, Any] = {}
    if args.event_log:
        overrides["event_log"] = args.event_log
    if args.format:
        overrides["output_format"] = args.format
    return {"global": overrides} if overrides else {}


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return EXIT_USAGE_ERROR
    try:
        runtime = load_runtime_config(
            config_path=Path(args.config) if args.config else None,
            overrides=build_overrides(args),
        )
    except BackendError as exc:
        print(f"[config] {exc.message}")
        return EXIT_USAGE_ERROR
    return args.func(args, runtime)


if __name__ == "__main__":
    raise SystemExit(main())
