"""User validation rules and the ValidationResult value object.

Rules run in declaration order and every failure is collected; validation
never short-circuits. A draft is valid only when no rule fails.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from userkit.domain.user import UserDraft

NAME_EMPTY = "Name cannot be empty."
AGE_NEGATIVE = "Age cannot be negative."


@dataclass(frozen=True)
class ValidationResult:
    """Result of validating a user draft."""

    valid: bool
    errors: list[str] = field(default_factory=list)


def _name_is_blank(draft: UserDraft) -> bool:
    return not draft.name or not draft.name.strip()


def _age_is_negative(draft: UserDraft) -> bool:
    return draft.age < 0


# (failure predicate, message) pairs, in reporting order.
USER_RULES: list[tuple[Callable[[UserDraft], bool], str]] = [
    (_name_is_blank, NAME_EMPTY),
    (_age_is_negative, AGE_NEGATIVE),
]


def validate_user(draft: UserDraft) -> ValidationResult:
    """Run every rule in :data:`USER_RULES` against *draft*."""
    errors = [message for fails, message in USER_RULES if fails(draft)]
    return ValidationResult(valid=not errors, errors=errors)
