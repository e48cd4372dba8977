"""Apply themes to the active terminal configuration and persist it."""

from __future__ import annotations

import logging
from pathlib import Path

from xfce_terminal_themes.core.config_store import IniDocument
from xfce_terminal_themes.errors import ConfigSaveError
from xfce_terminal_themes.themes.constants import ACTIVE_SECTION, FONT_NAME_KEY, THEME_NAME_KEY
from xfce_terminal_themes.themes.models import ApplyResult, CurrentTheme
from xfce_terminal_themes.themes.registry import ThemeRegistry

logger = logging.getLogger(__name__)


class ThemeService:
    """Reads and rewrites the `Configuration` section of terminalrc."""

    def __init__(self, config: IniDocument, registry: ThemeRegistry, config_path: Path) -> None:
        self._config = config
        self._registry = registry
        self._config_path = config_path

    @property
    def config_path(self) -> Path:
        return self._config_path

    def available_themes(self) -> list[str]:
        return self._registry.list_theme_names()

    def current_theme(self) -> CurrentTheme:
        return CurrentTheme(
            theme_name=self._config.key(ACTIVE_SECTION, THEME_NAME_KEY),
            font_name=self._config.key(ACTIVE_SECTION, FONT_NAME_KEY),
        )

    def apply_theme(self, theme_name: str) -> ApplyResult:
        """Copy the theme's keys over the active section, then save.

        Keys the theme does not mention are left alone. An unknown theme
        copies nothing but the file is still rewritten. A failed save is
        logged and reported through the result; it is never raised.
        """
        active = self._config.section(ACTIVE_SECTION)
        found = self._registry.has_theme(theme_name)
        if not found:
            logger.warning("theme not found: %r", theme_name)

        values = self._registry.get_theme(theme_name)
        for key, value in values.items():
            active[key] = value

        saved = True
        try:
            self._config.save(self._config_path)
        except ConfigSaveError as exc:
            saved = False
            logger.warning("could not save %s: %s", self._config_path, exc)
        else:
            logger.info("applied theme %r (%d keys) to %s", theme_name, len(values), self._config_path)

        return ApplyResult(
            theme_name=theme_name,
            found=found,
            keys_copied=len(values),
            saved=saved,
            config_path=self._config_path,
        )
