"""
Validation rule implementations for catalog entries.

Provides validators for required fields, numeric ranges and publication
years, plus the default rule set applied by the catalog service.
"""

from .base_validator import BaseValidator, ValidationError
from .book_rules import DEFAULT_BOOK_RULES, validate_book
from .range_validator import RangeValidator
from .required_field_validator import RequiredFieldValidator
from .year_validator import PublicationYearValidator

__all__ = [
    "BaseValidator",
    "ValidationError",
    "RequiredFieldValidator",
    "RangeValidator",
    "PublicationYearValidator",
    "DEFAULT_BOOK_RULES",
    "validate_book",
]
