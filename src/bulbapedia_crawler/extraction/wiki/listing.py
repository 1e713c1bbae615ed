# ABOUTME: Listing extraction for the national index page into catalog references
# ABOUTME: Malformed rows are skipped so one bad row never aborts the whole listing

import re

from bs4 import BeautifulSoup, Tag
from pydantic import ValidationError

from bulbapedia_crawler.core.models import PokemonReference
from bulbapedia_crawler.extraction.base import DocumentSource, ExtractionError
from bulbapedia_crawler.extraction.wiki.dom import row_cells
from bulbapedia_crawler.utils.logging import get_logger, log_extraction_step

INDEX_PAGE_PATH = "Ndex"

CONTENT_CONTAINER_SELECTOR = "#bodyContent"

NUMBER_PATTERN = re.compile(r"^\s*#[0-9]+\s*$")

NUMBER_COLUMN = 1
NAME_COLUMN = 3

logger = get_logger(__name__)


def catalog_rows(document: BeautifulSoup) -> list[Tag]:
    """All table rows of the content container except those of its first table.

    The first table on the index page is the navigation bar.

    Raises:
        ExtractionError: If the content container is missing
    """
    content = document.select_one(CONTENT_CONTAINER_SELECTOR)
    if content is None:
        raise ExtractionError(f"Index page has no content container ({CONTENT_CONTAINER_SELECTOR})")

    navigation = content.find("table")
    rows = []
    for row in content.select("table tr"):
        if navigation is not None and any(parent is navigation for parent in row.parents):
            continue
        rows.append(row)
    return rows


def is_catalog_row(row: Tag) -> bool:
    """A data row has at least four cells and a "#<digits>" marker in the second one."""
    cells = row_cells(row)
    if len(cells) <= NAME_COLUMN:
        return False
    return NUMBER_PATTERN.match(cells[NUMBER_COLUMN].get_text()) is not None


def parse_catalog_row(row: Tag) -> PokemonReference | None:
    """Build a reference from a data row, or None when the row cannot be read."""
    cells = row_cells(row)
    if len(cells) <= NAME_COLUMN:
        return None

    number_text = cells[NUMBER_COLUMN].get_text().strip().lstrip("#")
    name = cells[NAME_COLUMN].get_text().strip()
    if not number_text.isascii() or not number_text.isdigit() or not name:
        return None

    try:
        return PokemonReference(number=int(number_text), name=name)
    except ValidationError:
        return None


def extract_references(document: BeautifulSoup) -> list[PokemonReference]:
    """Extract the ordered, de-duplicated reference list from the index page.

    On duplicate numbers the first row encountered wins.

    Raises:
        ExtractionError: If the content container is missing
    """
    references: dict[int, PokemonReference] = {}
    skipped = 0

    for row in catalog_rows(document):
        if not is_catalog_row(row):
            continue

        reference = parse_catalog_row(row)
        if reference is None:
            skipped += 1
            logger.warning("Skipping malformed catalog row", row_text=row.get_text(" ", strip=True)[:100])
            continue

        references.setdefault(reference.number, reference)

    if skipped:
        logger.info("Catalog rows skipped", skipped=skipped, extracted=len(references))

    return sorted(references.values())


class ListingExtractor:
    """Loads the catalog reference list from the wiki's national index page."""

    def __init__(self, source: DocumentSource, path: str = INDEX_PAGE_PATH):
        self.source = source
        self.path = path

    @log_extraction_step("list_references")
    async def list_references(self) -> list[PokemonReference]:
        document = await self.source.fetch_document(self.path)
        return extract_references(document)
