# ABOUTME: Data extraction from Bulbapedia pages
# ABOUTME: Document fetching, tolerant field parsing, listing and detail extraction

"""
Extraction Layer: Turn wiki markup into structured records

This layer handles:
- Fetching and parsing wiki pages
- Locating structural anchors in the page layout
- Tolerant parsing of numeric and range fields

Data Flow: Wiki pages -> References and detail records -> core/ service
"""

from .base import CrawlerError, DocumentSource, ExtractionError, FetchError

__all__ = [
    "CrawlerError",
    "DocumentSource",
    "ExtractionError",
    "FetchError",
]
