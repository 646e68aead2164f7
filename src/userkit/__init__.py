"""userkit: validated user entities built through a fluent builder."""

from userkit.domain.errors import DomainError, ValidationError
from userkit.domain.user import (
    UserBuilder,
    UserEntity,
    UserFactory,
    UserPrimitive,
    user_factory,
)
from userkit.domain.validation import ValidationResult

__all__ = [
    "DomainError",
    "UserBuilder",
    "UserEntity",
    "UserFactory",
    "UserPrimitive",
    "ValidationError",
    "ValidationResult",
    "user_factory",
]
