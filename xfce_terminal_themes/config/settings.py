"""Environment-derived application settings and file paths."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping

from xfce_terminal_themes.themes.constants import CONFIG_FILE_NAME, THEMES_FILE_NAME

LOG_LEVEL_ENV = "XFCE4_TERMINAL_THEMES_LOG_LEVEL"
_APP_DIR_NAME = "xfce4-terminal-themes"


def config_base_dir(environ: Mapping[str, str] | None = None) -> Path:
    """Return `$XDG_HOME`, or `$HOME/.config` when it is unset or empty."""
    env = os.environ if environ is None else environ
    base = env.get("XDG_HOME", "")
    if base:
        return Path(base)
    home = env.get("HOME", "")
    return (Path(home) if home else Path.home()) / ".config"


def file_path_for(name: str, environ: Mapping[str, str] | None = None) -> Path:
    """Return the path of a terminal config file. Existence is not checked."""
    return config_base_dir(environ) / "xfce4" / "terminal" / name


class AppSettings:
    """Read-only view of the settings derived from the environment."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._env = dict(os.environ if environ is None else environ)

    # -- terminal files --

    @property
    def config_dir(self) -> Path:
        return config_base_dir(self._env)

    @property
    def terminalrc_path(self) -> Path:
        return file_path_for(CONFIG_FILE_NAME, self._env)

    @property
    def themes_path(self) -> Path:
        return file_path_for(THEMES_FILE_NAME, self._env)

    # -- logging --

    @property
    def log_dir(self) -> Path:
        return self.config_dir / _APP_DIR_NAME / "logs"

    @property
    def log_level(self) -> int:
        raw = (self._env.get(LOG_LEVEL_ENV) or "").strip().upper()
        level = logging.getLevelName(raw) if raw else logging.INFO
        if isinstance(level, int):
            return level
        return logging.INFO
