"""Theme switching constants."""

from __future__ import annotations

from xfce_terminal_themes.core.config_store import DEFAULT_SECTION

CONFIG_FILE_NAME = "terminalrc"
THEMES_FILE_NAME = "themes"

ACTIVE_SECTION = "Configuration"

THEME_NAME_KEY = "ThemeName"
FONT_NAME_KEY = "FontName"

__all__ = [
    "ACTIVE_SECTION",
    "CONFIG_FILE_NAME",
    "DEFAULT_SECTION",
    "FONT_NAME_KEY",
    "THEMES_FILE_NAME",
    "THEME_NAME_KEY",
]
