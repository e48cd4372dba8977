"""Theme switching models."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class CurrentTheme:
    """Theme and font recorded in the active configuration."""

    theme_name: str
    font_name: str

    def format(self) -> str:
        return f"Theme name: {self.theme_name}\nFont name: {self.font_name}\n"


@dataclass(frozen=True, slots=True)
class ApplyResult:
    """Outcome of copying a theme into the active configuration."""

    theme_name: str
    found: bool
    keys_copied: int
    saved: bool
    config_path: Path
