"""
PublicationYearValidator - a year range whose upper end follows the calendar.
"""

from collections.abc import Callable
from datetime import date
from typing import Any

from .range_validator import RangeValidator


class PublicationYearValidator(RangeValidator):
    """
    Accepts years from ``min_year`` up to the current year plus
    ``max_years_ahead``.
    """

    rule_name = "publication_year"

    def __init__(
        self,
        field_name: str,
        min_year: int = 1000,
        max_years_ahead: int = 1,
        today: Callable[[], date] = date.today,
    ):
        super().__init__(field_name, minimum=min_year)
        self.max_years_ahead = max_years_ahead
        self._today = today

    def bounds(self) -> tuple[int | None, int | None]:
        return self.minimum, self._today().year + self.max_years_ahead

    def validate(self, value: Any) -> None:
        minimum, maximum = self.bounds()
        if isinstance(value, int) and not isinstance(value, bool) and not minimum <= value <= maximum:
            self.fail(f"Year {value} must be between {minimum} and {maximum}")
        super().validate(value)
