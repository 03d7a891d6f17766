"""Exceptions raised by the capital city scraper."""

from typing import Optional


class ScraperError(Exception):
    """Base class for fatal scraper errors."""


class DocumentSourceError(ScraperError):
    """A page could not be fetched or rendered."""

    def __init__(self, message: str, uri: Optional[str] = None):
        super().__init__(message)
        self.uri = uri


class ScraperNotInitializedError(ScraperError):
    """The traversal was started before ``init()`` loaded the country list."""
