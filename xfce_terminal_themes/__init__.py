"""Switch xfce4-terminal between predefined themes."""

__version__ = "0.1.0"
