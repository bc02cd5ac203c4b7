"""
CSV codec for book catalogs.

Reads and writes the ``Id,Title,Author,Year`` layout with RFC-4180 style
quoting: a field containing a comma, double quote, CR or LF is wrapped in
double quotes and its embedded quotes are doubled. Quoted fields may span
several physical lines.

Reading is fail-soft: rows with fewer than four fields or a non-numeric id
are skipped, and a non-numeric year becomes 0.
"""

import re
from collections.abc import Iterable

from bookshelf.core.models import Book
from bookshelf.observability.logger import get_logger
from bookshelf.observability.metrics import default_collector

logger = get_logger(__name__)

CSV_HEADER = "Id,Title,Author,Year"
HEADER_PREFIX = "Id,"
MIN_FIELDS = 4

_SPECIAL_CHARS = (",", '"', "\n", "\r")
_INT_PATTERN = re.compile(r"^\s*[+-]?[0-9]+\s*$")


def escape(value: str | None) -> str:
    """
    Escape a single field for CSV output.

    Args:
        value: Raw field value

    Returns:
        Empty string for None/empty, the quoted form when the value holds a
        special character, otherwise the value unchanged
    """
    if not value:
        return ""

    if any(ch in value for ch in _SPECIAL_CHARS):
        return '"' + value.replace('"', '""') + '"'

    return value


def split_line(line: str) -> list[str]:
    """
    Split one logical CSV line on unquoted commas, unescaping quoted fields.

    Args:
        line: A logical line as returned by parse_lines()

    Returns:
        List of field values (at least one element)
    """
    if not line:
        return [""]

    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0
    length = len(line)

    while i < length:
        ch = line[i]

        if in_quotes:
            if ch == '"':
                if i + 1 < length and line[i + 1] == '"':
                    current.append('"')
                    i += 1
                else:
                    in_quotes = False
            else:
                current.append(ch)
        elif ch == ",":
            fields.append("".join(current))
            current = []
        elif ch == '"':
            in_quotes = True
        else:
            current.append(ch)

        i += 1

    fields.append("".join(current))
    return fields


def parse_lines(content: str) -> list[str]:
    """
    Split document text into logical lines.

    Quote characters are kept so split_line() can interpret them. A newline
    inside a quoted field belongs to the field; outside quotes CR is dropped
    and LF ends the current line. Empty lines are not returned.

    Args:
        content: Whole document text

    Returns:
        Logical lines in document order
    """
    lines: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0
    length = len(content)

    while i < length:
        ch = content[i]

        if in_quotes:
            if ch == '"' and i + 1 < length and content[i + 1] == '"':
                current.append('""')
                i += 1
            elif ch == '"':
                current.append('"')
                in_quotes = False
            else:
                current.append(ch)
        elif ch == "\n":
            if current:
                lines.append("".join(current))
                current = []
        elif ch == '"':
            current.append('"')
            in_quotes = True
        elif ch != "\r":
            current.append(ch)

        i += 1

    if current:
        lines.append("".join(current))

    return lines


def serialize_books(books: Iterable[Book]) -> str:
    """
    Render books as CSV text with a header, ordered by ascending id.

    Args:
        books: Books to serialize

    Returns:
        CSV document, every line terminated by LF
    """
    rows = [CSV_HEADER]
    for book in sorted(books, key=lambda b: b.id):
        rows.append(",".join([
            str(book.id),
            escape(book.title),
            escape(book.author),
            str(book.year),
        ]))
    return "\n".join(rows) + "\n"


def deserialize_books(text: str) -> list[Book]:
    """
    Parse CSV text into books, skipping malformed rows.

    Args:
        text: CSV document, with or without a header line

    Returns:
        Books in document order
    """
    if not text or text.isspace():
        return []

    lines = parse_lines(text)
    if not lines:
        return []

    start = 1 if lines[0].startswith(HEADER_PREFIX) else 0
    books: list[Book] = []

    for line_number, line in enumerate(lines[start:], start=start + 1):
        if line.isspace():
            continue

        fields = split_line(line)
        if len(fields) < MIN_FIELDS:
            _skip(line_number, "too_few_fields")
            continue

        book_id = _parse_int(fields[0])
        if book_id is None:
            _skip(line_number, "invalid_id")
            continue

        year = _parse_int(fields[3])
        books.append(Book(
            id=book_id,
            title=fields[1],
            author=fields[2],
            year=year if year is not None else 0,
        ))

    return books


def _parse_int(value: str) -> int | None:
    # int() alone would also accept "1_000" and non-ASCII digits
    if not _INT_PATTERN.match(value):
        return None
    return int(value)


def _skip(line_number: int, reason: str) -> None:
    logger.debug(
        "Skipping malformed CSV row",
        extra={"line_number": line_number, "reason": reason},
    )
    default_collector.record_skipped_csv_row(reason)
