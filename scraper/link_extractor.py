"""Link extraction for the country list and the country infobox."""

from typing import List, Optional
from utils.logger import get_logger
from scraper.document import Document, element_text, visible_text
from scraper.models import CapitalRef, CountryRef, Link

logger = get_logger(__name__)

# Second column of the country table holds the country link
COUNTRY_LINK_SELECTOR = 'table.wikitable tr > td:nth-child(2) > a'

COUNTRY_INFOBOX_ROW_SELECTOR = '.infobox.ib-country.vcard tr'
INFOBOX_DATA_LINK_SELECTOR = '.infobox-data a'
CAPITAL_LABEL = 'Capital'


def extract_links(
    document: Document,
    container_selector: str,
    link_selector: Optional[str] = None,
    text_filter: Optional[str] = None
) -> List[Link]:
    """
    Extract (label, URL) pairs from a document.

    Each element matching ``container_selector`` contributes at most one link:
    the first ``link_selector`` match inside it, or the container itself when
    ``link_selector`` is None. Containers whose text does not contain
    ``text_filter`` are skipped, as are containers without an anchor.

    Args:
        document: Parsed page
        container_selector: CSS selector for candidate rows/containers
        link_selector: CSS selector for the anchor inside each container
        text_filter: Literal text a container must contain (case-sensitive)

    Returns:
        Links in document order, with absolute URLs
    """
    links = []

    for container in document.select(container_selector):
        if text_filter is not None and text_filter not in element_text(container):
            continue

        anchor = container if link_selector is None else container.select_one(link_selector)
        if anchor is None:
            continue

        href = anchor.get('href')
        if not href:
            continue

        links.append(Link(label=visible_text(anchor), reference=document.absolute_url(href)))

    return links


def extract_country_links(document: Document) -> List[CountryRef]:
    """Return every country linked from the country table, in table order."""
    countries = [
        CountryRef(name=link.label, page_reference=link.reference)
        for link in extract_links(document, COUNTRY_LINK_SELECTOR)
    ]

    logger.debug(f"Found {len(countries)} countries on {document.url}")
    return countries


def extract_capital_link(document: Document) -> Optional[CapitalRef]:
    """
    Return the capital city link from a country infobox.

    The first infobox row mentioning "Capital" that holds a data link wins;
    multiple capitals are not disambiguated. Returns None if there is none.
    """
    links = extract_links(
        document,
        COUNTRY_INFOBOX_ROW_SELECTOR,
        INFOBOX_DATA_LINK_SELECTOR,
        text_filter=CAPITAL_LABEL
    )

    if not links:
        return None

    return CapitalRef(name=links[0].label, page_reference=links[0].reference)
