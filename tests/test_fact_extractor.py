"""Tests for labeled-fact extraction."""

import pytest
from scraper.fact_extractor import (
    AREA_PATTERN,
    POPULATION_PATTERN,
    extract_labeled_value,
    extract_area,
    extract_population,
    extract_flag_reference,
    parse_number,
)


def test_area_pattern_shapes():
    """Area needs the km2 unit right after the number."""
    assert AREA_PATTERN.match("357,021 km2 (137,847 sq mi)")
    assert AREA_PATTERN.match("891.3\xa0km2 (344.1\xa0sq\xa0mi)")
    assert not AREA_PATTERN.match("357,021")
    assert not AREA_PATTERN.match("about 357,021 km2")
    assert not AREA_PATTERN.match("4,500/km2")


def test_population_pattern_shapes():
    """Population is a bare number, optionally followed by a parenthesized note."""
    assert POPULATION_PATTERN.match("1,234,567")
    assert POPULATION_PATTERN.match("83,166,711 (2021 estimate)")
    assert not POPULATION_PATTERN.match("83,166,711 people")
    assert not POPULATION_PATTERN.match("4,500/km2 (11,000/sq mi)")
    assert not POPULATION_PATTERN.match("1st in Austria")


@pytest.mark.parametrize("text,expected", [
    ("1,234,567", "1234567"),
    ("357,021 km2 (137,847 sq mi)", "357021"),
    ("83,166,711 (2021 estimate)", "83166711"),
    ("891.3 km2", "891.3"),
    ("1,000.50", "1000.5"),
    (".", None),
    (",,", None),
])
def test_parse_number(text, expected):
    """Thousands separators are dropped and trailing text ignored."""
    assert parse_number(text) == expected


def test_area_cell_value(infobox):
    document = infobox(
        '<tr class="mergedtoprow"><th colspan="2">Area</th></tr>'
        '<tr class="mergedrow"><th>• Total</th><td>357,021 km2 (137,847 sq mi)</td></tr>'
    )

    assert extract_area(document) == "357021"


def test_population_cell_value(infobox):
    document = infobox(
        '<tr class="mergedtoprow"><th colspan="2">Population</th></tr>'
        '<tr class="mergedrow"><th>• Total</th><td>83,166,711 (2021 estimate)</td></tr>'
    )

    assert extract_population(document) == "83166711"


def test_unknown_label_is_absent(load_page):
    """A label that does not appear anywhere yields None."""
    document = load_page("Berlin")

    assert extract_labeled_value(document, "Coastline", AREA_PATTERN) is None
    assert extract_labeled_value(document, "area", AREA_PATTERN) is None


def test_value_in_header_row(infobox):
    """The header row itself belongs to the block."""
    document = infobox(
        '<tr class="mergedtoprow"><th>Population</th><td>1,234,567</td></tr>'
    )

    assert extract_population(document) == "1234567"


def test_block_stops_at_next_section(infobox):
    """Rows after the next mergedtoprow are not part of the block."""
    document = infobox(
        '<tr class="mergedtoprow"><th colspan="2">Area</th></tr>'
        '<tr class="mergedrow"><th>• Note</th><td>disputed</td></tr>'
        '<tr class="mergedtoprow"><th colspan="2">Elevation</th></tr>'
        '<tr class="mergedrow"><th>• Land</th><td>120 km2</td></tr>'
    )

    assert extract_area(document) is None


def test_first_matching_cell_wins(load_page):
    """City area comes before metro area; population skips the density row."""
    document = load_page("Berlin")

    assert extract_area(document) == "891.3"
    assert extract_population(document) == "3878100"


def test_blocks_from_multiple_headers_are_joined(infobox):
    """Every header containing the label contributes its block, in document order."""
    document = infobox(
        '<tr class="mergedtoprow"><th>Area code</th><td>030</td></tr>'
        '<tr class="mergedtoprow"><th>Elevation</th><td>34 m</td></tr>'
        '<tr class="mergedtoprow"><th colspan="2">Area</th></tr>'
        '<tr class="mergedrow"><th>• City</th><td>891.3 km2</td></tr>'
    )

    assert extract_area(document) == "891.3"


def test_no_matching_cell_is_absent(load_page):
    """Vienna has an "Area code" row but no area figure."""
    document = load_page("Vienna")

    assert extract_area(document) is None
    assert extract_population(document) == "1982097"


def test_label_match_is_case_sensitive(infobox):
    document = infobox(
        '<tr class="mergedtoprow"><th>POPULATION</th><td>1,234,567</td></tr>'
    )

    assert extract_population(document) is None


def test_headers_outside_merged_rows_are_ignored(infobox):
    document = infobox(
        '<tr class="mergedrow"><th>Population</th><td>1,234,567</td></tr>'
    )

    assert extract_population(document) is None


def test_flag_reference_is_absolute(load_page):
    document = load_page("Berlin")

    assert extract_flag_reference(document) == (
        "https://upload.wikimedia.org/wikipedia/commons/thumb/e/ec/"
        "Flag_of_Berlin.svg/100px-Flag_of_Berlin.svg.png"
    )


def test_flag_reference_absent(infobox):
    document = infobox('<tr class="mergedtoprow"><th>Population</th><td>1</td></tr>')

    assert extract_flag_reference(document) is None


def test_flag_requires_linked_image(infobox):
    """An image outside an anchor in the map cell is not the flag."""
    document = infobox(
        '<tr><td class="infobox-full-data maptable">'
        '<img src="//upload.wikimedia.org/skyline.jpg" class="mw-file-element"></td></tr>'
    )

    assert extract_flag_reference(document) is None
