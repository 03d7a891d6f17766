"""Extraction of labeled facts (area, population, flag) from a settlement infobox.

Infobox sections start with a ``mergedtoprow`` row whose header names the
fact. The values sit in that row or in the plain rows that follow it, until
the next ``mergedtoprow``. The first data cell in that block that looks like
the expected value is taken and normalised to a plain decimal number.
"""

import re
from typing import List, Optional
from bs4.element import Tag
from utils.logger import get_logger
from scraper.document import Document, element_text

logger = get_logger(__name__)

SECTION_ROW_CLASS = 'mergedtoprow'
SECTION_HEADER_SELECTOR = f'.{SECTION_ROW_CLASS} th'
FLAG_IMAGE_SELECTOR = '.infobox.ib-settlement.vcard .infobox-full-data.maptable a img.mw-file-element'

# "891.3 km2 (344.1 sq mi)"
AREA_PATTERN = re.compile(r'^[0-9,.]+\s+km2.*$')
# "1,000,000" or "83,166,711 (2021 estimate)"
POPULATION_PATTERN = re.compile(r'^[0-9,.]+(\s+\(.*\))?$')

AREA_LABEL = 'Area'
POPULATION_LABEL = 'Population'

_LEADING_NUMBER = re.compile(r'^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')


def parse_number(text: str) -> Optional[str]:
    """
    Parse the number at the start of a formatted figure.

    Thousands separators are dropped and anything after the number (units,
    footnotes, annotations) is ignored. Integral values lose their ``.0``.

    >>> parse_number("357,021 km2 (137,847 sq mi)")
    '357021'
    >>> parse_number("891.3 km2")
    '891.3'
    """
    match = _LEADING_NUMBER.match(text.strip().replace(',', ''))
    if match is None:
        return None

    value = float(match.group(0))
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _is_section_row(row: Tag) -> bool:
    return SECTION_ROW_CLASS in (row.get('class') or [])


def collect_block(header_row: Tag) -> List[Tag]:
    """Return the header row plus the following rows up to the next section row."""
    block = [header_row]
    row = header_row.find_next_sibling()

    while row is not None and not _is_section_row(row):
        block.append(row)
        row = row.find_next_sibling()

    return block


def extract_labeled_value(document: Document, label: str, value_pattern: re.Pattern) -> Optional[str]:
    """
    Find the value for a labeled infobox section.

    Args:
        document: Parsed capital city page
        label: Text the section header must contain (case-sensitive)
        value_pattern: Shape of the cell holding the value

    Returns:
        The first matching value as a plain decimal string, or None
    """
    rows = []
    for header in document.select(SECTION_HEADER_SELECTOR):
        if label in element_text(header) and header.parent is not None:
            rows.extend(collect_block(header.parent))

    for row in rows:
        for cell in row.find_all('td'):
            text = element_text(cell).strip()
            if value_pattern.match(text):
                value = parse_number(text)
                logger.debug(f"{label}: '{text}' -> {value}")
                return value

    logger.debug(f"No value found for '{label}' on {document.url}")
    return None


def extract_area(document: Document) -> Optional[str]:
    """Area in square kilometres."""
    return extract_labeled_value(document, AREA_LABEL, AREA_PATTERN)


def extract_population(document: Document) -> Optional[str]:
    return extract_labeled_value(document, POPULATION_LABEL, POPULATION_PATTERN)


def extract_flag_reference(document: Document) -> Optional[str]:
    """Return the absolute URL of the flag image in the settlement infobox, or None."""
    image = document.select_one(FLAG_IMAGE_SELECTOR)
    if image is None or not image.get('src'):
        return None

    return document.absolute_url(image['src'])
