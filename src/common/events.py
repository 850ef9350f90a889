"""Structured metric event logging."""
from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Optional

from .models import MetricOutcome


class MetricEventLogger:
    """Writes one JSONL record per metric invocation for later inspection."""

    def __init__(self, path: Optional[Path]) -> None:
        self.path = path
        if path:
            path.parent.mkdir(parents=True, exist_ok=True)

    def emit(self, outcome: MetricOutcome) -> None:
        if not self.path:
            return
        payload = outcome.to_dict()
        payload["timestamp"] = time.time()
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(payload))
            handle.write("\n")
