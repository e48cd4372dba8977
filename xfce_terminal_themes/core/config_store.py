"""Load, edit and save INI documents such as `terminalrc` and `themes`."""

from __future__ import annotations

import configparser
import logging
from pathlib import Path
from typing import MutableMapping, TextIO

from xfce_terminal_themes.errors import (
    ConfigLoadError,
    ConfigSaveError,
    ErrorCode,
    classify_exception,
)

logger = logging.getLogger(__name__)

# configparser folds its default section into every other section. Using a
# name that never appears in a file keeps `[DEFAULT]` an ordinary section.
_NO_DEFAULT_SECTION = "\x00default"

# Keys that come before the first header belong to this section.
DEFAULT_SECTION = "DEFAULT"


def _new_parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(
        delimiters=("=",),
        comment_prefixes=("#", ";"),
        inline_comment_prefixes=None,
        strict=False,
        empty_lines_in_values=False,
        default_section=_NO_DEFAULT_SECTION,
        interpolation=None,
    )
    parser.optionxform = str  # keys are case-sensitive
    return parser


def _normalize(text: str) -> str:
    """Left-trim every line and give leading header-less keys a `[DEFAULT]` header."""
    lines = [line.lstrip() for line in text.splitlines()]
    for line in lines:
        if not line or line.startswith(("#", ";")):
            continue
        if not line.startswith("["):
            lines.insert(0, f"[{DEFAULT_SECTION}]")
        break
    return "\n".join(lines) + "\n"


class IniDocument:
    """An in-memory INI document, written back wholesale on save."""

    def __init__(self, parser: configparser.ConfigParser | None = None,
                 path: Path | None = None) -> None:
        self._parser = parser if parser is not None else _new_parser()
        self._path = path

    @classmethod
    def load(cls, path: Path) -> IniDocument:
        """Read and parse `path`, raising ConfigLoadError on any failure."""
        path = Path(path)
        parser = _new_parser()
        try:
            text = path.read_text(encoding="utf-8")
            parser.read_string(_normalize(text), source=str(path))
        except (OSError, UnicodeDecodeError, configparser.Error) as exc:
            classified = classify_exception(exc, path)
            raise ConfigLoadError(classified.code, path=path, details=classified.details) from exc
        logger.debug("loaded %s (%d sections)", path, len(parser.sections()))
        return cls(parser, path)

    @property
    def path(self) -> Path | None:
        return self._path

    def section_names(self) -> list[str]:
        return self._parser.sections()

    def has_section(self, name: str) -> bool:
        return self._parser.has_section(name)

    def section(self, name: str) -> MutableMapping[str, str]:
        """Return the named section, creating an empty one if absent."""
        if not self._parser.has_section(name):
            self._parser.add_section(name)
        return self._parser[name]

    def key(self, section_name: str, name: str) -> str:
        """Return a key's value, or an empty string if it is absent."""
        return self._parser.get(section_name, name, fallback="")

    def set_key(self, section_name: str, name: str, value: str) -> None:
        self.section(section_name)[name] = value

    def save(self, path: Path | None = None) -> Path:
        """Overwrite `path` (default: the load path) with the full document."""
        target = Path(path) if path is not None else self._path
        if target is None:
            raise ConfigSaveError(ErrorCode.CONFIG_SAVE_FAILED, message="No path to save to.")
        try:
            with target.open("w", encoding="utf-8") as handle:
                self._write(handle)
        except OSError as exc:
            raise ConfigSaveError(
                ErrorCode.CONFIG_SAVE_FAILED,
                path=target,
                details={"original": str(exc)},
            ) from exc
        logger.debug("saved %s", target)
        return target

    def _write(self, handle: TextIO) -> None:
        # The default section goes first, without a header.
        names = self._parser.sections()
        if DEFAULT_SECTION in names:
            for key, value in self._parser[DEFAULT_SECTION].items():
                handle.write(f"{key}={value}\n")
            handle.write("\n")
        for name in names:
            if name == DEFAULT_SECTION:
                continue
            handle.write(f"[{name}]\n")
            for key, value in self._parser[name].items():
                handle.write(f"{key}={value}\n")
            handle.write("\n")
