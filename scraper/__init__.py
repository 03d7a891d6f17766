"""Scraper package initialization."""

from .exceptions import ScraperError, DocumentSourceError, ScraperNotInitializedError
from .models import Link, CountryRef, CapitalRef, CapitalRecord
from .document import Document
from .document_source import (
    DocumentSource,
    SeleniumDocumentSource,
    HttpDocumentSource,
    StaticDocumentSource,
    create_document_source
)
from .link_extractor import extract_links, extract_country_links, extract_capital_link
from .fact_extractor import (
    AREA_PATTERN,
    POPULATION_PATTERN,
    extract_labeled_value,
    extract_area,
    extract_population,
    extract_flag_reference,
    parse_number
)
from .capital_scraper import CapitalCityScraper, save_records

__all__ = [
    'ScraperError',
    'DocumentSourceError',
    'ScraperNotInitializedError',
    'Link',
    'CountryRef',
    'CapitalRef',
    'CapitalRecord',
    'Document',
    'DocumentSource',
    'SeleniumDocumentSource',
    'HttpDocumentSource',
    'StaticDocumentSource',
    'create_document_source',
    'extract_links',
    'extract_country_links',
    'extract_capital_link',
    'AREA_PATTERN',
    'POPULATION_PATTERN',
    'extract_labeled_value',
    'extract_area',
    'extract_population',
    'extract_flag_reference',
    'parse_number',
    'CapitalCityScraper',
    'save_records'
]
