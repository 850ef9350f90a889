"""Helpers for loading runtime configuration."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .errors import BackendError, ErrorCode
from .models import GlobalSettings, RuntimeConfig

DEFAULT_CONFIG_PATH = Path("config/defaults.json")
ALLOWED_OUTPUT_FORMATS = {"plain", "json"}


def load_runtime_config(
    *,
    config_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Dict[str, Any]]] = None,
) -> RuntimeConfig:
    """Load configuration JSON, apply overrides, and validate the result.

    Without an explicit path a missing default file is not an error; the
    built-in defaults are used instead.
    """

    if config_path is None and not DEFAULT_CONFIG_PATH.exists():
        raw: Dict[str, Any] = {"version": 1, "global": {}}
        source = DEFAULT_CONFIG_PATH
    else:
        source = config_path or DEFAULT_CONFIG_PATH
        raw = _read_config_json(source)

    version = _require_positive_int(raw.get("version"), "version", source)
    global_section = raw.get("global")
    if not isinstance(global_section, Mapping):
        raise BackendError(ErrorCode.CONFIG_ERROR, f"'global' section missing in {source}")

    overrides = overrides or {}
    global_data = {**global_section, **(overrides.get("global") or {})}
    return RuntimeConfig(
        global_settings=_build_global_settings(global_data, source),
        version=version,
    )


# ---------------------------------------------------------------------------
# Internal helpers


def _read_config_json(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except FileNotFoundError as exc:
        raise BackendError(ErrorCode.CONFIG_ERROR, f"Config file '{path}' not found") from exc
    except json.JSONDecodeError as exc:
        raise BackendError(ErrorCode.CONFIG_ERROR, f"Config file '{path}' is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise BackendError(ErrorCode.CONFIG_ERROR, f"Config file '{path}' must contain an object")
    return payload


def _build_global_settings(data: Mapping[str, Any], source: Path) -> GlobalSettings:
    event_log = data.get("event_log", GlobalSettings().event_log)
    if event_log is not None:
        event_log = _require_path(event_log, "global.event_log", source)
    output_format = _require_string(
        data.get("output_format", GlobalSettings().output_format),
        "global.output_format",
        source,
    ).lower()
    if output_format not in ALLOWED_OUTPUT_FORMATS:
        allowed = ", ".join(sorted(ALLOWED_OUTPUT_FORMATS))
        raise BackendError(
            ErrorCode.CONFIG_ERROR,
            f"Unsupported output_format '{data.get('output_format')}' in {source}. Allowed: {allowed}",
        )
    return GlobalSettings(event_log=event_log, output_format=output_format)  # type: ignore[arg-type]


def _require_string(value: Any, field: str, source: Path) -> str:
    if not isinstance(value, str):
        raise BackendError(ErrorCode.CONFIG_ERROR, f"{field} must be a string in {source}")
    text = value.strip()
    if not text:
        raise BackendError(ErrorCode.CONFIG_ERROR, f"{field} must be non-empty in {source}")
    return text


def _require_path(value: Any, field: str, source: Path) -> str:
    _require_string(value, field, source)
    return value


def _require_positive_int(value: Any, field: str, source: Path) -> int:
    if isinstance(value, bool):
        raise BackendError(ErrorCode.CONFIG_ERROR, f"{field} must be an integer in {source}")
    try:
        num = int(value)
    except (TypeError, ValueError) as exc:
        raise BackendError(
            ErrorCode.CONFIG_ERROR,
            f"{field} must be an integer in {source}",
        ) from exc
    if num <= 0:
        raise BackendError(
            ErrorCode.CONFIG_ERROR,
            f"{field} must be greater than zero in {source}",
        )
    return num
