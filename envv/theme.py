"""
envv/theme.py
Semantic color theme for CLI output.

Supports:
  - NO_COLOR=1 → disable all colors
  - ENVV_THEME=minimal → alternative theme

Usage:
    from envv.theme import theme
    console.print(f"{theme.tag('error', '✗')} missing")
"""

from __future__ import annotations

import os

_STYLES = ("accent", "success", "warning", "error", "muted", "info", "heading")


class Theme:
    """Semantic color definitions for consistent CLI appearance."""

    def __init__(self):
        self._no_color = bool(os.environ.get("NO_COLOR"))
        self._theme_name = os.environ.get("ENVV_THEME", "default")

        if self._no_color:
            self._apply_no_color()
        elif self._theme_name == "minimal":
            self._apply_minimal()
        else:
            self._apply_default()

    def _apply_default(self):
        self.accent = "bold cyan"
        self.success = "green"
        self.warning = "yellow"
        self.error = "red"
        self.muted = "dim"
        self.info = "cyan"
        self.heading = "bold"

    def _apply_minimal(self):
        """Minimal theme — fewer colors, cleaner look."""
        self.accent = "bold"
        self.success = "green"
        self.warning = "yellow"
        self.error = "red"
        self.muted = "dim"
        self.info = ""
        self.heading = "bold"

    def _apply_no_color(self):
        for attr in _STYLES:
            setattr(self, attr, "")

    def tag(self, style: str, text: str) -> str:
        """Wrap *text* in rich markup for semantic *style* (no-op if empty)."""
        value = getattr(self, style)
        if not value:
            return text
        return f"[{value}]{text}[/{value}]"


# Singleton instance
theme = Theme()
