"""Entry point for `python -m xfce_terminal_themes`."""

import sys


def main():
    from xfce_terminal_themes.app import run_app
    sys.exit(run_app())


if __name__ == "__main__":
    main()
