"""Shared test fixtures for a11yguard."""

from __future__ import annotations

from pathlib import Path

import pytest

from a11yguard.config import Settings
from a11yguard.core.auditor import Auditor
from a11yguard.markup.document import MarkupDocument, parse_markup
from a11yguard.rules import DEFAULT_CATALOG, RuleCatalog

# A complete page that passes every rule at every level.
CLEAN_PAGE = """<!DOCTYPE html>
<html lang="en">
<head><title>Home</title></head>
<body>
<header><nav><a href="/about">About us</a></nav></header>
<main>
<h1>Welcome</h1>
<img src="logo.png" alt="Company logo">
<label for="q">Search</label>
<input type="search" id="q" name="q">
<button type="submit">Go</button>
</main>
<footer>Contact</footer>
</body>
</html>
"""

# A page whose errors are all repairable by the fix passes.
BROKEN_PAGE = """<!DOCTYPE html>
<html>
<head><title>Shop</title></head>
<body>
<header><nav><a href="/cart">Cart</a></nav></header>
<main>
<h1>Products</h1>
<h3>Featured</h3>
<img src="hero.jpg">
<input type="email" name="userEmail">
<button class="btn-close"><svg viewBox="0 0 10 10"></svg></button>
</main>
<footer>Contact</footer>
</body>
</html>
"""


@pytest.fixture
def clean_page() -> str:
    """A page with no accessibility issues."""
    return CLEAN_PAGE


@pytest.fixture
def broken_page() -> str:
    """A page with one defect for each fix pass."""
    return BROKEN_PAGE


@pytest.fixture
def parse():
    """Parse markup into a MarkupDocument."""

    def _parse(markup: str) -> MarkupDocument:
        return parse_markup(markup)

    return _parse


@pytest.fixture
def catalog() -> RuleCatalog:
    """The built-in rule catalog."""
    return DEFAULT_CATALOG


@pytest.fixture
def auditor(catalog: RuleCatalog) -> Auditor:
    """An Auditor over the built-in catalog."""
    return Auditor(catalog)


@pytest.fixture
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Default Settings that ignore the caller's environment and .env file."""
    for name in (
        "A11YGUARD_LEVEL",
        "A11YGUARD_DEFAULT_LANG",
        "A11YGUARD_REPORT_FORMAT",
        "A11YGUARD_LOG_LEVEL",
        "A11YGUARD_LARGE_TEXT",
    ):
        monkeypatch.delenv(name, raising=False)
    fresh = Settings(_env_file=None)
    monkeypatch.setattr("a11yguard.config.settings", fresh)
    return fresh


@pytest.fixture
def write_file(tmp_path: Path):
    """Write *content* to *name* under a temp directory and return the path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
