"""
Validator contract shared by the catalog's business rules.
"""

from abc import ABC, abstractmethod
from typing import Any, NoReturn


class ValidationError(Exception):
    """Raised when a book field breaks a business rule."""

    def __init__(self, rule_name: str, field_name: str, message: str):
        self.rule_name = rule_name
        self.field_name = field_name
        self.message = message
        super().__init__(f"[{rule_name}] {field_name}: {message}")


class BaseValidator(ABC):
    """
    One rule checked against one field of a book.

    Subclasses set ``rule_name`` and implement ``validate``.
    """

    rule_name: str = "rule"

    def __init__(self, field_name: str):
        self.field_name = field_name

    @abstractmethod
    def validate(self, value: Any) -> None:
        """
        Raises:
            ValidationError: If value breaks the rule
        """

    def fail(self, message: str) -> NoReturn:
        raise ValidationError(self.rule_name, self.field_name, message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(field={self.field_name})"
