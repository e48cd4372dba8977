"""Error codes and error handling utilities for xfce4-terminal-themes."""

from __future__ import annotations

import configparser
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for theme switching operations."""

    # Configuration file errors
    CONFIG_MISSING = auto()
    CONFIG_ACCESS_DENIED = auto()
    CONFIG_INVALID = auto()
    CONFIG_SAVE_FAILED = auto()

    # Operation errors
    OPERATION_FAILED = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.CONFIG_MISSING: "Configuration file not found.",
    ErrorCode.CONFIG_ACCESS_DENIED: "Access denied. Check file permissions.",
    ErrorCode.CONFIG_INVALID: "Configuration file is not valid INI.",
    ErrorCode.CONFIG_SAVE_FAILED: "Cannot save configuration. Check folder permissions.",
    ErrorCode.OPERATION_FAILED: "Operation failed. See details for more information.",
}


@dataclass
class ThemeSwitchError(Exception):
    """Base exception with error code and context."""

    code: ErrorCode
    message: str = ""
    path: Path | None = None
    details: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")

    def __str__(self) -> str:
        parts = [self.message.rstrip(".")]
        if self.path:
            parts.append(f" ({self.path})")
        original = self.details.get("original")
        if original:
            # parser errors carry the offending line on following lines
            parts.append(f": {str(original).splitlines()[0]}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "code": self.code.name,
            "message": self.message,
            "path": str(self.path) if self.path else None,
            "details": self.details,
        }


class ConfigLoadError(ThemeSwitchError):
    """Raised when a configuration or themes file cannot be read or parsed."""


class ConfigSaveError(ThemeSwitchError):
    """Raised when a configuration file cannot be written."""


def classify_exception(exc: Exception, path: Path | None = None) -> ThemeSwitchError:
    """Classify a generic exception into a ThemeSwitchError with appropriate code."""
    details = {"original": str(exc)}

    if isinstance(exc, ThemeSwitchError):
        return exc
    if isinstance(exc, FileNotFoundError):
        return ThemeSwitchError(ErrorCode.CONFIG_MISSING, path=path, details=details)
    if isinstance(exc, (PermissionError, IsADirectoryError)):
        return ThemeSwitchError(ErrorCode.CONFIG_ACCESS_DENIED, path=path, details=details)
    if isinstance(exc, (configparser.Error, UnicodeDecodeError)):
        return ThemeSwitchError(ErrorCode.CONFIG_INVALID, path=path, details=details)

    return ThemeSwitchError(
        ErrorCode.OPERATION_FAILED,
        message=f"{type(exc).__name__}: {exc}",
        path=path,
        details=details,
    )


def format_error_for_user(error: ThemeSwitchError | Exception) -> str:
    """Format an error as a single line for the console."""
    if isinstance(error, ThemeSwitchError):
        return str(error)
    return format_error_for_user(classify_exception(error))
