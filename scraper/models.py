"""Data models for countries, capitals and the scraped capital records."""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Link:
    """An anchor found in a document: its visible text and absolute URL."""
    label: str
    reference: str


@dataclass(frozen=True)
class CountryRef:
    """A country listed on the start page."""
    name: str
    page_reference: str


@dataclass(frozen=True)
class CapitalRef:
    """The capital city link found on a country page."""
    name: str
    page_reference: str


@dataclass(frozen=True)
class CapitalRecord:
    """
    Facts scraped from a capital city page.

    ``area``, ``population`` and ``flag_image_reference`` are None when the
    page did not provide them.
    """
    name: str
    page_reference: str
    country_name: str
    area: Optional[str] = None
    population: Optional[str] = None
    flag_image_reference: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
