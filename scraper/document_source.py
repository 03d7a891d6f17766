"""Document sources: the only place pages are fetched.

Every source turns a URL into a parsed ``Document``. The traversal receives a
source explicitly, so extractors can run against saved fixtures without a
browser or network.
"""

from pathlib import Path
from typing import Dict, Optional
import requests
from requests.adapters import HTTPAdapter
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.remote.webdriver import WebDriver
from urllib3.util.retry import Retry
from utils.logger import get_logger, timed_operation
from utils.file_utils import load_html_directory
from config.settings import get_config
from scraper.document import Document
from scraper.exceptions import DocumentSourceError
from scraper.selenium_utils import create_webdriver, wait_for_page_ready

logger = get_logger(__name__)


class DocumentSource:
    """Base class for objects that fetch and parse pages."""

    def open(self, uri: str) -> Document:
        raise NotImplementedError

    def close(self) -> None:
        """Release the underlying session. Safe to call more than once."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


class SeleniumDocumentSource(DocumentSource):
    """Loads pages in a single reused Chrome session."""

    def __init__(self, headless: Optional[bool] = None, driver: Optional[WebDriver] = None):
        """
        Args:
            headless: Run Chrome without a window (uses config default if None)
            driver: Existing WebDriver to reuse instead of starting Chrome
        """
        self.headless = headless
        self._driver = driver

    @property
    def driver(self) -> WebDriver:
        if self._driver is None:
            try:
                self._driver = create_webdriver(self.headless)
            except WebDriverException as e:
                raise DocumentSourceError(f"Could not start Chrome: {e.msg}") from e
        return self._driver

    @timed_operation("Browser page load")
    def open(self, uri: str) -> Document:
        logger.debug(f"Opening {uri} in browser")

        try:
            self.driver.get(uri)
            wait_for_page_ready(self.driver)
            return Document(self.driver.page_source, self.driver.current_url)
        except WebDriverException as e:
            raise DocumentSourceError(f"Navigation to {uri} failed: {e.msg}", uri) from e

    def close(self) -> None:
        if self._driver is not None:
            self._driver.quit()
            self._driver = None
            logger.info("Closed WebDriver")


def create_session() -> requests.Session:
    """
    Create a requests session with retry strategy and proper headers.

    Returns:
        Configured requests Session
    """
    config = get_config()
    session = requests.Session()

    retry_strategy = Retry(
        total=config.get('http.retries', 2),
        backoff_factor=config.get('http.backoff_factor', 0.3),
        status_forcelist=[429, 500, 502, 503, 504],
    )
    adapter = HTTPAdapter(max_retries=retry_strategy)
    session.mount("http://", adapter)
    session.mount("https://", adapter)

    session.headers.update({
        'User-Agent': config.get(
            'http.user_agent',
            'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36'
        )
    })

    return session


class HttpDocumentSource(DocumentSource):
    """Fetches static HTML over HTTP. Much faster than a browser for server-rendered pages."""

    def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        self._session = session
        self.timeout = timeout if timeout is not None else get_config().get('http.timeout', 15)

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            self._session = create_session()
        return self._session

    @timed_operation("HTTP page load")
    def open(self, uri: str) -> Document:
        logger.debug(f"Fetching {uri}")

        try:
            response = self.session.get(uri, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise DocumentSourceError(f"Fetching {uri} failed: {e}", uri) from e

        return Document(response.text, response.url or uri)

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None


class StaticDocumentSource(DocumentSource):
    """Serves pages from memory, keyed by URL."""

    def __init__(self, pages: Dict[str, str]):
        self.pages = dict(pages)
        self.closed = False
        self.opened = []

    @classmethod
    def from_directory(cls, directory: Path) -> 'StaticDocumentSource':
        """Build a source from saved pages (see ``load_html_directory``)."""
        return cls(load_html_directory(Path(directory)))

    def open(self, uri: str) -> Document:
        if self.closed:
            raise DocumentSourceError("Document source is closed", uri)
        if uri not in self.pages:
            raise DocumentSourceError(f"No page stored for {uri}", uri)

        self.opened.append(uri)
        return Document(self.pages[uri], uri)

    def close(self) -> None:
        self.closed = True


def create_document_source(kind: Optional[str] = None, headless: Optional[bool] = None) -> DocumentSource:
    """
    Create the document source named in configuration.

    Args:
        kind: 'selenium' or 'http' (uses scraper.source if None)
        headless: Passed to the Selenium source

    Returns:
        A new, unopened DocumentSource
    """
    if kind is None:
        kind = get_config().get('scraper.source', 'selenium')

    if kind == 'selenium':
        return SeleniumDocumentSource(headless=headless)
    if kind == 'http':
        return HttpDocumentSource()

    raise ValueError(f"Unknown document source: {kind}")
