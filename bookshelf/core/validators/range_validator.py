"""
RangeValidator - integer bounds for ids and years.
"""

from typing import Any

from .base_validator import BaseValidator


class RangeValidator(BaseValidator):
    """
    Accepts integers within ``minimum`` and ``maximum`` (both inclusive).

    Either bound may be omitted, but not both.
    """

    rule_name = "range"

    def __init__(self, field_name: str, minimum: int | None = None, maximum: int | None = None):
        super().__init__(field_name)

        if minimum is None and maximum is None:
            raise ValueError("RangeValidator requires a minimum or a maximum")
        if minimum is not None and maximum is not None and minimum > maximum:
            raise ValueError(f"minimum {minimum} is greater than maximum {maximum}")

        self.minimum = minimum
        self.maximum = maximum

    def bounds(self) -> tuple[int | None, int | None]:
        return self.minimum, self.maximum

    def validate(self, value: Any) -> None:
        # bool is an int subclass but never a meaningful id or year
        if isinstance(value, bool) or not isinstance(value, int):
            self.fail(f"Value must be an integer, got {type(value).__name__}")

        minimum, maximum = self.bounds()
        if minimum is not None and value < minimum:
            self.fail(f"Value {value} is less than minimum {minimum}")
        if maximum is not None and value > maximum:
            self.fail(f"Value {value} exceeds maximum {maximum}")
