# ABOUTME: Detail extraction for a single species page into a PokemonDetails record
# ABOUTME: Each structural anchor has its own predicate so layout drift fails loudly and locally

from bs4 import BeautifulSoup, Tag

from bulbapedia_crawler.core.models import DEFAULT_HATCH_TIME, MISSING_VALUE, PokemonDetails, PokemonReference
from bulbapedia_crawler.extraction.base import DocumentSource, ExtractionError
from bulbapedia_crawler.extraction.parsers import parse_int_or_default, parse_range_or_default
from bulbapedia_crawler.extraction.wiki.dom import (
    element_children,
    first_element_child,
    leading_text,
    row_cells,
    table_rows,
)
from bulbapedia_crawler.utils.logging import get_logger, log_extraction_step

# The info panel is a "roundy" table that directly follows the species navigation table
INFO_PANEL_CANDIDATE_SELECTOR = "table + table.roundy"
INFO_PANEL_TITLE_SELECTOR = ":scope table tr:first-child > td:first-child > big > big > b"

CONTENT_TEXT_ID = "mw-content-text"

UNKNOWN_PLACEHOLDER = "unknown"

CATCH_RATE = "Catch rate"
BASE_EXPERIENCE_YIELD = "Base experience yield"
HATCH_TIME = "Hatch time"
BASE_FRIENDSHIP = "Base friendship"

logger = get_logger(__name__)


def page_path_for(reference: PokemonReference) -> str:
    """Wiki page path of a species, e.g. "Mr._Mime_(Pokémon)"."""
    return reference.name.strip().replace(" ", "_") + "_(Pokémon)"


def _is_placeholder(text: str) -> bool:
    return text.casefold().startswith(UNKNOWN_PLACEHOLDER)


# --- Structural anchors --------------------------------------------------------------


def is_info_panel(table: Tag) -> bool:
    """The info panel holds a nested table whose title cell wraps the name in big > big > b."""
    return table.select_one(INFO_PANEL_TITLE_SELECTOR) is not None


def is_panel_field_cell(cell: Tag) -> bool:
    """A field cell has a bold label immediately followed by a nested value table."""
    return cell.select_one("b + table") is not None


def is_type_row(row: Tag) -> bool:
    """The type row has a single cell whose first element reads "Type"."""
    cells = row_cells(row)
    if len(cells) != 1:
        return False
    first = first_element_child(cells[0])
    return first is not None and first.get_text().strip().casefold().startswith("type")


# --- Extraction steps ----------------------------------------------------------------


def find_info_panel(document: BeautifulSoup) -> Tag:
    """Locate the side panel with the species' general information.

    Raises:
        ExtractionError: If no candidate, or more than one, carries the panel anchor
    """
    panels = [table for table in document.select(INFO_PANEL_CANDIDATE_SELECTOR) if is_info_panel(table)]
    if not panels:
        raise ExtractionError(f"Info panel not found: no {INFO_PANEL_CANDIDATE_SELECTOR!r} table with a title cell")
    if len(panels) > 1:
        raise ExtractionError(f"Info panel is ambiguous: {len(panels)} tables carry a title cell")
    return panels[0]


def get_panel_value(panel: Tag, field_name: str) -> str | None:
    """Read a named value from the info panel.

    Placeholder values such as "Unknown" are passed over in favor of the next
    cell with the same label.

    Args:
        panel: The info panel table
        field_name: Label of the value, case-insensitive

    Returns:
        The trimmed value text, or None if the panel has no usable value
    """
    wanted = field_name.strip().casefold()

    for cell in panel.find_all("td"):
        if not is_panel_field_cell(cell):
            continue

        label = cell.find("b")
        if label is None or label.get_text().strip().casefold() != wanted:
            continue

        value_cell = cell.select_one("table td")
        if value_cell is None:
            continue

        value = leading_text(value_cell)
        if not value or _is_placeholder(value):
            continue

        return value

    return None


def _content_children(container: Tag) -> list[Tag]:
    children = element_children(container)
    # Newer MediaWiki versions wrap the article body in a parser output div
    if len(children) == 1 and children[0].name == "div" and "mw-parser-output" in children[0].get("class", []):
        return element_children(children[0])
    return children


def extract_description(document: BeautifulSoup) -> str:
    """Collect the introduction paragraphs that follow the leading tables.

    The article body starts with the navigation and info tables, then the
    introduction paragraphs, then the table of contents.

    Raises:
        ExtractionError: If the article content container is missing
    """
    container = document.find(id=CONTENT_TEXT_ID)
    if container is None:
        raise ExtractionError(f"Content container #{CONTENT_TEXT_ID} not found")

    children = iter(_content_children(container))
    paragraphs = []

    element = next(children, None)
    while element is not None and element.name == "table":
        element = next(children, None)

    while element is not None and element.name == "p":
        text = element.get_text().strip()
        if text:
            paragraphs.append(text)
        element = next(children, None)

    return "\n".join(paragraphs)


def extract_types(panel: Tag) -> list[str]:
    """Read the species' types from the type row of the info panel."""
    for row in panel.find_all("tr"):
        if not is_type_row(row):
            continue

        types = []
        for name in _type_cells(row_cells(row)[0]):
            text = name.get_text().strip()
            if not text or "\n" in text or _is_placeholder(text):
                continue
            types.append(text)

        if types:
            return types

    return []


def _type_cells(cell: Tag) -> list[Tag]:
    """Cells of the type table nested as table > row > first cell > table > row > cells."""
    outer = cell.find("table", recursive=False)
    if outer is None:
        return []

    outer_rows = table_rows(outer)
    if not outer_rows:
        return []

    outer_cells = row_cells(outer_rows[0])
    if not outer_cells:
        return []

    inner = outer_cells[0].find("table", recursive=False)
    if inner is None:
        return []

    inner_rows = table_rows(inner)
    if not inner_rows:
        return []

    return row_cells(inner_rows[0])


def extract_details(document: BeautifulSoup, reference: PokemonReference) -> PokemonDetails:
    """Build the detail record for a reference from its parsed species page.

    Raises:
        ExtractionError: If the info panel or content container cannot be located
    """
    panel = find_info_panel(document)
    hatch_time_min, hatch_time_max = parse_range_or_default(get_panel_value(panel, HATCH_TIME), DEFAULT_HATCH_TIME)

    return PokemonDetails(
        reference=reference,
        description=extract_description(document),
        types=extract_types(panel),
        catch_rate=parse_int_or_default(get_panel_value(panel, CATCH_RATE), MISSING_VALUE),
        base_experience_yield=parse_int_or_default(get_panel_value(panel, BASE_EXPERIENCE_YIELD), MISSING_VALUE),
        hatch_time_min=hatch_time_min,
        hatch_time_max=hatch_time_max,
        base_friendship=parse_int_or_default(get_panel_value(panel, BASE_FRIENDSHIP), MISSING_VALUE),
    )


class DetailExtractor:
    """Loads full detail records for catalog references on demand."""

    def __init__(self, source: DocumentSource):
        self.source = source

    @log_extraction_step("get_details")
    async def get_details(self, reference: PokemonReference) -> PokemonDetails:
        document = await self.source.fetch_document(page_path_for(reference))
        details = extract_details(document, reference)
        logger.debug("Extracted details", number=reference.number, types=details.types, catch_rate=details.catch_rate)
        return details
