"""Shared error codes and exceptions for metric handlers and the CLI."""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    CONFIG_ERROR = "CONFIG_ERROR"
    PARAMETER_ERROR = "PARAMETER_ERROR"
    IO_ERROR = "IO_ERROR"
    KEY_ERROR = "KEY_ERROR"
    UNSUPPORTED = "UNSUPPORTED"


class BackendError(RuntimeError):
    """Exception carrying a structured error code for CLI/agents."""

    def __init__(self, code: ErrorCode, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.code = code
        self.context = context or {}

    @property
    def message(self) -> str:
        return super().__str__()

    def __str__(self) -> str:  # pragma: no cover - formatting sugar
        base = self.message
        return f"[{self.code.value}] {base}" if base else self.code.value


class MetricError(BackendError):
    """Base class for failures reported back to the metric caller."""


class InvalidParameterCount(MetricError):
    def __init__(self, count: int) -> None:
        super().__init__(
            ErrorCode.PARAMETER_ERROR,
            "Invalid number of parameters.",
            context={"count": count},
        )


class InvalidPath(MetricError):
    def __init__(self) -> None:
        super().__init__(ErrorCode.PARAMETER_ERROR, "Invalid first parameter.")


class InvalidMode(MetricError):
    def __init__(self, mode: str) -> None:
        super().__init__(
            ErrorCode.PARAMETER_ERROR,
            "Invalid second parameter.",
            context={"mode": mode},
        )


class _OSErrorWrapper(MetricError):
    prefix = ""

    def __init__(self, path: str, error: Exception) -> None:
        super().__init__(
            ErrorCode.IO_ERROR,
            f"{self.prefix}: {_os_error_text(error)}",
            context={"path": path},
        )
        self.os_error = error


class StatError(_OSErrorWrapper):
    """Raised when file metadata cannot be obtained."""

    prefix = "Cannot obtain file information"


class OpenError(_OSErrorWrapper):
    """Raised when the file cannot be opened for reading."""

    prefix = "Invalid first parameter"


class ReadError(_OSErrorWrapper):
    """Raised when reading file content fails before end of stream."""

    prefix = "Invalid file content"


class UnsupportedMetric(MetricError):
    def __init__(self, key: str) -> None:
        super().__init__(ErrorCode.UNSUPPORTED, "Unsupported metric.", context={"key": key})


class ItemKeyError(BackendError):
    """Raised when an item key string cannot be parsed."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(
            ErrorCode.KEY_ERROR,
            f"Invalid item key '{text}': {reason}",
            context={"key": text},
        )


def _os_error_text(error: Exception) -> str:
    strerror = getattr(error, "strerror", None)
    if strerror and getattr(error, "filename", None) is not None:
        return f"{strerror}: '{error.filename}'"  # type: ignore[attr-defined]
    return strerror or str(error)
