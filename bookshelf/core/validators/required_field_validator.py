"""
RequiredFieldValidator - rejects missing and blank text.
"""

from typing import Any

from .base_validator import BaseValidator


class RequiredFieldValidator(BaseValidator):
    """Title and author must hold at least one non-whitespace character."""

    rule_name = "required_field"

    def validate(self, value: Any) -> None:
        if value is None:
            self.fail("Field value is null")

        if not isinstance(value, str):
            self.fail(f"Field must be text, got {type(value).__name__}")

        if not value.strip():
            self.fail("Field value is empty string")
