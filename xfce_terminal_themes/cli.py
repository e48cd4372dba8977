"""Command-line parsing and dispatch."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Sequence, TextIO, Union

from xfce_terminal_themes import __version__
from xfce_terminal_themes.themes.service import ThemeService

USAGE = "%(prog)s [OPTIONS|THEME NAME]"


@dataclass(frozen=True, slots=True)
class Options:
    """Parsed command line, built once at startup."""

    prog: str
    show_help: bool = False
    list_themes: bool = False
    current: bool = False
    version: bool = False
    theme_tokens: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ShowHelp:
    pass


@dataclass(frozen=True, slots=True)
class ListThemes:
    pass


@dataclass(frozen=True, slots=True)
class ShowCurrent:
    pass


@dataclass(frozen=True, slots=True)
class ShowVersion:
    pass


@dataclass(frozen=True, slots=True)
class ApplyTheme:
    name: str


@dataclass(frozen=True, slots=True)
class ShowUsage:
    pass


Action = Union[ShowHelp, ListThemes, ShowCurrent, ShowVersion, ApplyTheme, ShowUsage]


def build_parser(prog: str | None = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        usage=USAGE,
        description="Switch xfce4-terminal between the themes in its themes file.",
        add_help=False,
    )
    parser.add_argument("-l", "--themes", action="store_true", help="List theme names")
    parser.add_argument("-c", "--current", action="store_true", help="Display current theme")
    parser.add_argument("-V", "--version", action="store_true", help="Show version")
    parser.add_argument("-h", "--help", action="store_true", help="Show help")
    parser.add_argument("theme", nargs="*", metavar="THEME NAME", help="Theme to apply")
    return parser


def parse_options(argv: Sequence[str] | None = None, prog: str | None = None) -> Options:
    """Parse `argv` into Options. Usage errors exit with status 2."""
    parser = build_parser(prog)
    args = parser.parse_intermixed_args(argv)
    return Options(
        prog=parser.prog,
        show_help=args.help,
        list_themes=args.themes,
        current=args.current,
        version=args.version,
        theme_tokens=tuple(args.theme),
    )


def select_action(options: Options) -> Action:
    """Pick the single action to run; the first matching flag wins."""
    if options.show_help:
        return ShowHelp()
    if options.list_themes:
        return ListThemes()
    if options.current:
        return ShowCurrent()
    if options.version:
        return ShowVersion()
    if options.theme_tokens:
        return ApplyTheme(" ".join(options.theme_tokens))
    return ShowUsage()


def dispatch(
    action: Action,
    options: Options,
    service: ThemeService,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Run `action` and return the process exit code."""
    out = stdout if stdout is not None else sys.stdout
    err = stderr if stderr is not None else sys.stderr

    if isinstance(action, ListThemes):
        for name in service.available_themes():
            out.write(f"{name}\n")
    elif isinstance(action, ShowCurrent):
        out.write(service.current_theme().format())
    elif isinstance(action, ShowVersion):
        out.write(f"{options.prog} {__version__}\n")
    elif isinstance(action, ApplyTheme):
        # Unknown themes and failed saves are logged, not reported.
        service.apply_theme(action.name)
    else:
        build_parser(options.prog).print_help(err)
    return 0
