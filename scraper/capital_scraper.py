"""Traversal from the country list to each capital city page."""

import time
from pathlib import Path
from typing import List, Optional
from utils.logger import get_logger, log_milestone
from utils.file_utils import save_json, records_to_json
from config.settings import get_config
from scraper.document import Document
from scraper.document_source import DocumentSource
from scraper.exceptions import ScraperNotInitializedError
from scraper.fact_extractor import extract_area, extract_population, extract_flag_reference
from scraper.link_extractor import extract_country_links, extract_capital_link
from scraper.models import CapitalRecord, CapitalRef, CountryRef

logger = get_logger(__name__)


class CapitalCityScraper:
    """
    Visits every country on the start page and scrapes its capital city.

    Pages are fetched one at a time through the given document source. A
    fetch failure propagates and aborts the run; countries without a capital
    link are skipped.
    """

    def __init__(self, source: DocumentSource, start_url: Optional[str] = None):
        """
        Args:
            source: Document source used for every page
            start_url: Country list URL (uses scraper.start_url if None)
        """
        self.source = source
        self.start_url = start_url or get_config().start_url
        self._country_list: Optional[Document] = None

    @property
    def initialized(self) -> bool:
        return self._country_list is not None

    def init(self) -> None:
        """Load the country list page."""
        logger.info(f"Loading country list: {self.start_url}")
        self._country_list = self.source.open(self.start_url)

    def _require_init(self) -> Document:
        if self._country_list is None:
            raise ScraperNotInitializedError("init() must be called before scraping")
        return self._country_list

    def scrape_countries(self) -> List[CapitalRecord]:
        """
        Scrape the capital of every listed country.

        Returns:
            One record per country with a capital link, in country-list order
        """
        country_list = self._require_init()
        countries = extract_country_links(country_list)
        logger.info(f"Found {len(countries)} countries")

        records = []
        start_time = time.time()

        for index, country in enumerate(countries, 1):
            logger.info(f"[{index}/{len(countries)}] {country.name}")
            country_page = self.source.open(country.page_reference)

            capital = extract_capital_link(country_page)
            if capital is None:
                logger.info(f"No capital link found for {country.name}, skipping")
                continue

            records.append(self.scrape_city_details(capital, country))

        log_milestone(
            f"Scraped {len(records)} capitals from {len(countries)} countries",
            time.time() - start_time
        )
        return records

    def scrape_city_details(self, capital: CapitalRef, country: CountryRef) -> CapitalRecord:
        """Open a capital city page and read its area, population and flag."""
        self._require_init()
        page = self.source.open(capital.page_reference)

        record = CapitalRecord(
            name=capital.name,
            page_reference=capital.page_reference,
            country_name=country.name,
            area=extract_area(page),
            population=extract_population(page),
            flag_image_reference=extract_flag_reference(page),
        )

        logger.debug(
            f"{record.name}: area={record.area}, population={record.population}, "
            f"flag={'yes' if record.flag_image_reference else 'no'}"
        )
        return record

    def run(self) -> List[CapitalRecord]:
        """Load the country list and scrape every capital."""
        self.init()
        return self.scrape_countries()

    def close(self) -> None:
        self.source.close()


def save_records(records: List[CapitalRecord], output_path: Path) -> None:
    """Write records to a JSON array file."""
    save_json(records_to_json(records), output_path)
