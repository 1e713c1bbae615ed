from .details import DetailExtractor, extract_details
from .listing import ListingExtractor, extract_references
from .source import BulbapediaDocumentSource, parse_html

__all__ = [
    "BulbapediaDocumentSource",
    "DetailExtractor",
    "ListingExtractor",
    "extract_details",
    "extract_references",
    "parse_html",
]
