"""Domain-level exceptions."""

from __future__ import annotations


class DomainError(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainError):
    """A user draft failed one or more validation rules.

    Attributes:
        errors: Rule-failure messages in rule order.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__(f"Cannot create UserEntity. Errors: {', '.join(self.errors)}")
