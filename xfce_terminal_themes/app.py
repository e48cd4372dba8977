"""Application bootstrap."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from typing import Mapping, Sequence

from xfce_terminal_themes.cli import dispatch, parse_options, select_action
from xfce_terminal_themes.config.settings import AppSettings
from xfce_terminal_themes.core.config_store import IniDocument
from xfce_terminal_themes.errors import ConfigLoadError, format_error_for_user
from xfce_terminal_themes.themes.registry import ThemeRegistry
from xfce_terminal_themes.themes.service import ThemeService


def _configure_logger(settings: AppSettings) -> logging.Logger:
    logger = logging.getLogger("xfce_terminal_themes")
    if logger.handlers:
        return logger

    logger.setLevel(settings.log_level)
    logger.propagate = False
    try:
        log_dir = settings.log_dir
        log_dir.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = RotatingFileHandler(
            log_dir / "themes.log",
            maxBytes=512_000,
            backupCount=3,
            encoding="utf-8",
        )
    except OSError:
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    return logger


def run_app(argv: Sequence[str] | None = None, environ: Mapping[str, str] | None = None) -> int:
    """Parse arguments, load both documents and run the selected action."""
    options = parse_options(argv)
    settings = AppSettings(environ)
    logger = _configure_logger(settings)

    try:
        config = IniDocument.load(settings.terminalrc_path)
        themes = IniDocument.load(settings.themes_path)
    except ConfigLoadError as exc:
        logger.error("startup failed: %s", exc.to_dict())
        print(f"Fail to read file: {format_error_for_user(exc)}")
        return 1

    service = ThemeService(config, ThemeRegistry(themes), settings.terminalrc_path)
    action = select_action(options)
    logger.debug("action=%s", action)
    return dispatch(action, options, service)
