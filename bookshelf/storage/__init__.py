"""
Text codecs for persisted catalogs.
"""

from .csv_codec import (
    CSV_HEADER,
    deserialize_books,
    escape,
    parse_lines,
    serialize_books,
    split_line,
)

__all__ = [
    "CSV_HEADER",
    "escape",
    "split_line",
    "parse_lines",
    "serialize_books",
    "deserialize_books",
]
