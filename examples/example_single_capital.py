"""
Example: Scrape a single capital city page over HTTP

This example shows how to read area, population and flag from one
capital city page without starting a browser.
"""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from scraper import HttpDocumentSource, extract_area, extract_population, extract_flag_reference
from utils import get_logger

logger = get_logger(__name__)


def main():
    url = sys.argv[1] if len(sys.argv) > 1 else "https://en.wikipedia.org/wiki/Lisbon"

    with HttpDocumentSource() as source:
        page = source.open(url)

    logger.info(f"Capital page: {page.url}")
    logger.info(f"  Area:       {extract_area(page)} km2")
    logger.info(f"  Population: {extract_population(page)}")
    logger.info(f"  Flag:       {extract_flag_reference(page)}")


if __name__ == "__main__":
    main()
