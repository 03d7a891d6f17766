"""File utilities for the capital city scraper."""

import json
from pathlib import Path
from typing import Any, Dict, List
from utils.logger import get_logger

logger = get_logger(__name__)


def dump_json(data: Any, indent: int = 2) -> str:
    """Serialize data the same way save_json writes it."""
    return json.dumps(data, indent=indent, ensure_ascii=False)


def save_json(data: Any, output_path: Path, indent: int = 2) -> None:
    """
    Save data to JSON file.

    Args:
        data: Data to save (must be JSON serializable)
        output_path: Path to output file
        indent: JSON indentation level
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(dump_json(data, indent=indent))

    logger.info(f"Saved JSON data to {output_path}")


def load_json(input_path: Path) -> Any:
    """
    Load data from JSON file.

    Args:
        input_path: Path to input file

    Returns:
        Parsed JSON data, or None if the file does not exist
    """
    if not input_path.exists():
        logger.warning(f"File not found: {input_path}")
        return None

    with open(input_path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    logger.info(f"Loaded JSON data from {input_path}")
    return data


def load_html_directory(directory: Path, index_name: str = "urls.json") -> Dict[str, str]:
    """
    Load saved HTML pages keyed by the URL they were fetched from.

    The directory holds one ``.html`` file per page plus an index JSON file
    mapping each URL to its file name.

    Args:
        directory: Directory containing the pages
        index_name: Name of the URL index file

    Returns:
        Dictionary mapping URLs to HTML text
    """
    index = load_json(directory / index_name)
    if index is None:
        raise FileNotFoundError(f"No page index found in {directory}")

    pages = {}
    for url, file_name in index.items():
        pages[url] = (directory / file_name).read_text(encoding='utf-8')

    logger.debug(f"Loaded {len(pages)} HTML pages from {directory}")
    return pages


def records_to_json(records: List[Any]) -> List[Dict[str, Any]]:
    """Convert a list of records exposing ``to_dict`` into JSON-ready dicts."""
    return [record.to_dict() for record in records]
