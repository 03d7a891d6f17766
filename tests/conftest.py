"""Test configuration and fixtures."""

import pytest
from pathlib import Path
from utils.file_utils import load_html_directory
from scraper.document import Document
from scraper.document_source import StaticDocumentSource

PAGES_DIR = Path(__file__).parent / "fixtures" / "pages"
START_URL = "https://en.wikipedia.org/wiki/List_of_European_countries_by_area"


@pytest.fixture
def pages_dir():
    """Directory of saved pages: country list, 3 countries, 2 capitals."""
    return PAGES_DIR


@pytest.fixture
def start_url():
    return START_URL


@pytest.fixture
def fixture_pages():
    """Saved pages keyed by URL."""
    return load_html_directory(PAGES_DIR)


@pytest.fixture
def static_source(fixture_pages):
    """Document source serving the saved pages."""
    return StaticDocumentSource(fixture_pages)


@pytest.fixture
def load_page(fixture_pages):
    """Return a parsed fixture page by its wiki article name."""
    def _load(article):
        url = f"https://en.wikipedia.org/wiki/{article}"
        return Document(fixture_pages[url], url)
    return _load


@pytest.fixture
def infobox():
    """Wrap table rows in a settlement infobox and parse them."""
    def _build(rows_html, url="https://en.wikipedia.org/wiki/Test"):
        html = (
            '<table class="infobox ib-settlement vcard"><tbody>'
            f'{rows_html}'
            '</tbody></table>'
        )
        return Document(html, url)
    return _build
