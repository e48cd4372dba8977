"""Theme catalog backed by the `themes` INI document."""

from __future__ import annotations

from xfce_terminal_themes.core.config_store import IniDocument
from xfce_terminal_themes.themes.constants import DEFAULT_SECTION


class ThemeRegistry:
    """Exposes the sections of a themes document as named themes."""

    def __init__(self, themes: IniDocument) -> None:
        self._themes = themes

    def list_theme_names(self) -> list[str]:
        """Return every theme name except the default section, sorted by code point."""
        return sorted(name for name in self._themes.section_names() if name != DEFAULT_SECTION)

    def has_theme(self, name: str) -> bool:
        return self._themes.has_section(name)

    def get_theme(self, name: str) -> dict[str, str]:
        """Return a copy of the theme's keys; an unknown theme has none."""
        if not self._themes.has_section(name):
            return {}
        return dict(self._themes.section(name))
