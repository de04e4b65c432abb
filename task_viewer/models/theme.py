"""Persisted light/dark preference for the viewer page.

Stored as {"theme": "..."} in a small JSON file. Anything unreadable or
unknown reads back as the default.
"""
import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

LIGHT = "light"
DARK = "dark"
THEMES = (LIGHT, DARK)
DEFAULT_THEME = LIGHT

THEME_KEY = "theme"


def icon(theme: str) -> str:
    """Icon for the toggle button: offer the opposite theme."""
    return "☀️" if theme == DARK else "🌙"


class ThemePreference:
    def __init__(self, path):
        self.path = Path(path)

    def load(self) -> str:
        if not self.path.exists():
            return DEFAULT_THEME
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError):
            logger.warning("Could not read theme file %s; using %s", self.path, DEFAULT_THEME)
            return DEFAULT_THEME

        theme = data.get(THEME_KEY) if isinstance(data, dict) else None
        return theme if theme in THEMES else DEFAULT_THEME

    def save(self, theme: str) -> None:
        if theme not in THEMES:
            raise ValueError(f"Unknown theme: {theme}")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump({THEME_KEY: theme}, f)

    def toggle(self) -> str:
        new_theme = LIGHT if self.load() == DARK else DARK
        self.save(new_theme)
        return new_theme
