"""HTML parsing helper handed to providers."""

from __future__ import annotations

from bs4 import BeautifulSoup


def parse_html(html: str | bytes) -> BeautifulSoup:
    """Parse markup into a CSS-selectable BeautifulSoup tree (``lxml`` parser)."""
    return BeautifulSoup(html, "lxml")
