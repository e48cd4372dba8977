"""End-to-end tests for xfce_terminal_themes.app."""

from __future__ import annotations

from pathlib import Path

import pytest

from xfce_terminal_themes.app import run_app
from xfce_terminal_themes.core.config_store import IniDocument


@pytest.fixture
def home(tmp_path: Path) -> Path:
    terminal_dir = tmp_path / "xfce4" / "terminal"
    terminal_dir.mkdir(parents=True)
    (terminal_dir / "terminalrc").write_text(
        "[Configuration]\nThemeName=Stock\nFontName=Monospace 10\n", encoding="utf-8"
    )
    (terminal_dir / "themes").write_text(
        "[Dark]\nBackgroundColor=#000000\n\n[Light]\nBackgroundColor=#FFFFFF\n", encoding="utf-8"
    )
    return tmp_path


def _env(home: Path) -> dict[str, str]:
    return {"XDG_HOME": str(home), "HOME": "/nonexistent"}


def test_list_themes(home: Path, capsys) -> None:
    assert run_app(["--themes"], _env(home)) == 0
    assert capsys.readouterr().out == "Dark\nLight\n"


def test_current(home: Path, capsys) -> None:
    assert run_app(["-c"], _env(home)) == 0
    assert capsys.readouterr().out == "Theme name: Stock\nFont name: Monospace 10\n"


def test_apply_named_theme(home: Path) -> None:
    assert run_app(["Dark"], _env(home)) == 0
    config = IniDocument.load(home / "xfce4" / "terminal" / "terminalrc")
    assert config.key("Configuration", "BackgroundColor") == "#000000"
    assert config.key("Configuration", "ThemeName") == "Stock"


def test_no_arguments_prints_usage(home: Path, capsys) -> None:
    assert run_app([], _env(home)) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[OPTIONS|THEME NAME]" in captured.err


def test_missing_config_fails_without_writing(tmp_path: Path, capsys) -> None:
    terminal_dir = tmp_path / "xfce4" / "terminal"
    terminal_dir.mkdir(parents=True)
    themes = terminal_dir / "themes"
    themes.write_text("[Dark]\nBackgroundColor=#000000\n", encoding="utf-8")

    assert run_app(["Dark"], _env(tmp_path)) == 1
    assert capsys.readouterr().out.startswith("Fail to read file: ")
    assert not (terminal_dir / "terminalrc").exists()
    assert themes.read_text(encoding="utf-8") == "[Dark]\nBackgroundColor=#000000\n"


def test_missing_themes_file_fails(home: Path, capsys) -> None:
    (home / "xfce4" / "terminal" / "themes").unlink()
    assert run_app(["-l"], _env(home)) == 1
    assert "Fail to read file: " in capsys.readouterr().out


def test_startup_log_written(home: Path) -> None:
    run_app(["Dark"], _env(home))
    log_file = home / "xfce4-terminal-themes" / "logs" / "themes.log"
    assert log_file.exists()
    assert "applied theme 'Dark'" in log_file.read_text(encoding="utf-8")


def test_list_themes_skips_header_less_keys(home: Path, capsys) -> None:
    (home / "xfce4" / "terminal" / "themes").write_text(
        "Author=me\n[Dark]\nBackgroundColor=#000000\n", encoding="utf-8"
    )
    assert run_app(["-l"], _env(home)) == 0
    assert capsys.readouterr().out == "Dark\n"


def test_apply_multi_word_theme(home: Path) -> None:
    (home / "xfce4" / "terminal" / "themes").write_text(
        "[Solarized Dark]\nBackgroundColor=#002b36\nFontName=Hack 11\n", encoding="utf-8"
    )
    assert run_app(["Solarized", "Dark"], _env(home)) == 0
    config = IniDocument.load(home / "xfce4" / "terminal" / "terminalrc")
    assert config.key("Configuration", "BackgroundColor") == "#002b36"
    assert config.key("Configuration", "FontName") == "Hack 11"


def test_flag_between_theme_tokens_wins(home: Path, capsys) -> None:
    assert run_app(["Solarized", "-c", "Dark"], _env(home)) == 0
    assert capsys.readouterr().out == "Theme name: Stock\nFont name: Monospace 10\n"


def test_parse_failure_message_is_one_line(home: Path, capsys) -> None:
    (home / "xfce4" / "terminal" / "themes").write_text("[Dark\nBackgroundColor=#000000\n", encoding="utf-8")
    assert run_app(["-l"], _env(home)) == 1
    out = capsys.readouterr().out
    assert out.startswith("Fail to read file: Configuration file is not valid INI")
    assert out.count("\n") == 1
