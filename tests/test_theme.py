"""
tests/test_theme.py
Tests for envv/theme.py — semantic colours and markup tags.
"""

from envv.theme import Theme


class TestTheme:

    def test_no_color(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        theme = Theme()
        assert theme.error == ""
        assert theme.tag("error", "✗") == "✗"

    def test_default_tags(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.delenv("ENVV_THEME", raising=False)
        assert Theme().tag("error", "x") == "[red]x[/red]"

    def test_minimal(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("ENVV_THEME", "minimal")
        theme = Theme()
        assert theme.accent == "bold"
        assert theme.tag("info", "plain") == "plain"
