"""Main CLI entry point for the capital city scraper."""

import sys
import argparse
from pathlib import Path
from config import get_config
from utils import setup_logger, get_logger, set_level
from scraper import (
    CapitalCityScraper,
    ScraperError,
    StaticDocumentSource,
    create_document_source,
    save_records,
)

logger = get_logger(__name__)


def _create_source(args):
    """Pick the document source requested on the command line."""
    if args.pages_dir:
        return StaticDocumentSource.from_directory(Path(args.pages_dir))
    return create_document_source(args.source, headless=args.headless)


def cmd_scrape(args):
    """Execute the scraping command."""
    if args.verbose:
        set_level('DEBUG')
        logger.info("=== Verbose logging enabled ===")

    logger.info("=== Starting Capital City Scraping ===")

    config = get_config()

    if args.output:
        output_file = Path(args.output)
    elif args.save:
        output_file = config.get_full_path('paths.output_file')
    else:
        output_file = None

    try:
        source = _create_source(args)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Could not create document source: {e}")
        return 1

    scraper = CapitalCityScraper(source, start_url=args.start_url)

    try:
        records = scraper.run()
    except ScraperError as e:
        logger.error(f"Scraping failed: {e}", exc_info=True)
        return 1
    finally:
        scraper.close()

    logger.info(f"=== Scraping Complete: {len(records)} capital cities ===")
    for record in records:
        logger.info(
            f"{record.name} ({record.country_name}): "
            f"area={record.area} km2, population={record.population}, "
            f"flag={record.flag_image_reference}"
        )

    if output_file is not None:
        save_records(records, output_file)
        logger.info(f"Results saved to {output_file}")

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Capital city scraper - area, population and flag of European capitals",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Scrape with a visible Chrome window (default)
  python main.py scrape

  # Scrape headless and save the results
  python main.py scrape --headless -o capitals.json

  # Fetch pages over plain HTTP instead of a browser
  python main.py scrape --source http --save
        """
    )

    subparsers = parser.add_subparsers(dest='command', help='Command to execute')

    parser_scrape = subparsers.add_parser('scrape', help='Scrape capital cities')
    parser_scrape.add_argument(
        '--source',
        choices=['selenium', 'http'],
        help='How pages are fetched (default: from config)'
    )
    mode = parser_scrape.add_mutually_exclusive_group()
    mode.add_argument(
        '--headless',
        dest='headless',
        action='store_true',
        default=None,
        help='Run the browser without a window'
    )
    mode.add_argument(
        '--visible',
        dest='headless',
        action='store_false',
        help='Show the browser window'
    )
    parser_scrape.add_argument(
        '--start-url',
        help='Country list URL (default: from config)'
    )
    parser_scrape.add_argument(
        '--pages-dir',
        help='Read pages from a directory of saved HTML instead of the web'
    )
    parser_scrape.add_argument(
        '-o', '--output',
        help='Output JSON file for the scraped records'
    )
    parser_scrape.add_argument(
        '--save',
        action='store_true',
        help='Save results to the configured output file'
    )
    parser_scrape.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging (DEBUG level)'
    )

    return parser


def main(argv=None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    log_level = 'DEBUG' if getattr(args, 'verbose', False) else None
    setup_logger('capitals', level=log_level)

    commands = {
        'scrape': cmd_scrape,
    }

    return commands[args.command](args)


if __name__ == '__main__':
    sys.exit(main())
