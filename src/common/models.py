"""Data models shared across the CLI, metric handlers, and the event log."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Literal, Optional

OutputFormat = Literal["plain", "json"]


class SizeMode(str, Enum):
    """What `vfs.file.size` measures."""

    BYTES = "bytes"
    LINES = "lines"


@dataclass(slots=True, frozen=True)
class MetricDescriptor:
    """Metric key exported by a plugin."""

    key: str
    description: str


@dataclass(slots=True)
class MetricOutcome:
    """Result of one metric invocation as seen by the shell and the event log."""

    key: str
    params: List[str] = field(default_factory=list)
    value: Optional[int] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None
    duration_ms: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error_message is None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-friendly dict."""

        return {
            "key": self.key,
            "params": list(self.params),
            "value": self.value,
            "error_code": self.error_code,
            "error_message": self.error_message,
            "duration_ms": round(self.duration_ms, 3),
        }


@dataclass(slots=True)
class GlobalSettings:
    event_log: Optional[str] = None
    output_format: OutputFormat = "plain"


@dataclass(slots=True)
class RuntimeConfig:
    global_settings: GlobalSettings = field(default_factory=GlobalSettings)
    version: int = 1
