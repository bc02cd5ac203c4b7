"""
Default validation rules for catalog entries.
"""

from collections.abc import Sequence

from bookshelf.core.models import Book

from .base_validator import BaseValidator
from .range_validator import RangeValidator
from .required_field_validator import RequiredFieldValidator
from .year_validator import PublicationYearValidator

DEFAULT_BOOK_RULES: tuple[BaseValidator, ...] = (
    RangeValidator("id", minimum=1),
    RequiredFieldValidator("title"),
    RequiredFieldValidator("author"),
    PublicationYearValidator("year"),
)


def validate_book(book: Book | None, rules: Sequence[BaseValidator] = DEFAULT_BOOK_RULES) -> Book:
    """
    Apply rules in order, raising on the first failure.

    Args:
        book: Book to validate
        rules: Validators to apply

    Returns:
        The same book, for chaining

    Raises:
        ValueError: If book is None
        ValidationError: If any rule fails
    """
    if book is None:
        raise ValueError("book must not be None")

    for validator in rules:
        validator.validate(getattr(book, validator.field_name))
    return book
