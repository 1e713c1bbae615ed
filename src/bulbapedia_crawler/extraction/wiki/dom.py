# ABOUTME: Small null-safe traversal helpers over BeautifulSoup trees
# ABOUTME: Every helper returns None or an empty list instead of failing on missing nodes

from bs4 import NavigableString, Tag
from bs4.element import Comment


def element_children(tag: Tag) -> list[Tag]:
    """Direct child elements, skipping text and comment nodes."""
    return [child for child in tag.children if isinstance(child, Tag)]


def first_element_child(tag: Tag) -> Tag | None:
    return next(iter(element_children(tag)), None)


def table_rows(table: Tag) -> list[Tag]:
    """Rows belonging directly to a table, with or without a tbody wrapper."""
    return table.select(":scope > tr, :scope > tbody > tr, :scope > thead > tr")


def row_cells(row: Tag) -> list[Tag]:
    return row.find_all(["td", "th"], recursive=False)


def leading_text(tag: Tag) -> str | None:
    """The tag's first child when it is a text node, stripped."""
    first = next(iter(tag.children), None)
    if isinstance(first, NavigableString) and not isinstance(first, Comment):
        return first.strip()
    return None
