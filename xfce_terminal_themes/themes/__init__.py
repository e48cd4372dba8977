"""Theme catalog and apply service exports."""

from xfce_terminal_themes.themes.constants import ACTIVE_SECTION, DEFAULT_SECTION
from xfce_terminal_themes.themes.models import ApplyResult, CurrentTheme
from xfce_terminal_themes.themes.registry import ThemeRegistry
from xfce_terminal_themes.themes.service import ThemeService

__all__ = [
    "ACTIVE_SECTION",
    "DEFAULT_SECTION",
    "ApplyResult",
    "CurrentTheme",
    "ThemeRegistry",
    "ThemeService",
]
