"""User entity, draft builder, and factory.

The factory is the single entry point for user data:

- ``user_factory.create(name, age)`` returns a :class:`UserBuilder`.
- Chainable setters adjust the draft; ``validate()`` / ``is_valid()`` report
  on it without raising.
- ``build()`` validates and returns a frozen :class:`UserEntity`, or raises
  :class:`~userkit.domain.errors.ValidationError`.

INVARIANT: A UserEntity only exists if it passed validation. Constructing one
directly (``UserEntity(...)`` or ``UserEntity.model_validate(...)``) raises
``TypeError``: the model requires a module-private token in its validation
context, and only :meth:`UserBuilder.build` supplies it. The token is never
stored on the instance. ``model_construct`` and ``model_copy(update=...)``
skip validators entirely, so both are closed off as well.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Self, TypedDict

from pydantic import BaseModel, ConfigDict, ValidationInfo, model_validator

from userkit.domain.errors import ValidationError
from userkit.domain.validation import ValidationResult, validate_user

logger = logging.getLogger(__name__)

_BRAND_KEY = "_userkit_brand"
_FACTORY_TOKEN = object()


class UserPrimitive(TypedDict):
    """Plain serializable form of a user."""

    name: str
    age: int


class UserEntity(BaseModel):
    """Validated, immutable user. Obtain instances from :class:`UserBuilder`."""

    model_config = ConfigDict(frozen=True)

    name: str
    age: int

    @model_validator(mode="before")
    @classmethod
    def require_factory_token(cls, data: Any, info: ValidationInfo) -> Any:
        context = info.context or {}
        if context.get(_BRAND_KEY) is not _FACTORY_TOKEN:
            msg = "UserEntity can only be created through UserFactory"
            raise TypeError(msg)
        return data

    @classmethod
    def model_construct(cls, _fields_set: set[str] | None = None, **values: Any) -> Self:
        msg = "UserEntity can only be created through UserFactory"
        raise TypeError(msg)

    def model_copy(self, *, update: Mapping[str, Any] | None = None, deep: bool = False) -> Self:
        if update:
            msg = "UserEntity is immutable; rebuild it through UserFactory to change fields"
            raise TypeError(msg)
        return super().model_copy(deep=deep)


@dataclass
class UserDraft:
    """Mutable working state for a user under construction."""

    name: str
    age: int


class UserBuilder:
    """Chainable builder over a single :class:`UserDraft`.

    Builders are supplied by :class:`UserFactory`; each ``build()`` call
    snapshots the current draft, so later setter calls never affect an
    entity that was already built.
    """

    def __init__(self, draft: UserDraft) -> None:
        self._draft = draft

    def set_name(self, name: str) -> Self:
        self._draft.name = name
        return self

    def set_age(self, age: int) -> Self:
        self._draft.age = age
        return self

    def is_valid(self) -> bool:
        """Quick check: True when every rule passes."""
        return validate_user(self._draft).valid

    def validate(self) -> ValidationResult:
        """Return the validity flag and the ordered rule-failure messages."""
        return validate_user(self._draft)

    def build(self) -> UserEntity:
        """Validate the draft and return a frozen :class:`UserEntity`.

        Raises:
            ValidationError: One or more rules failed. ``errors`` holds
                every failure message in rule order.
        """
        result = validate_user(self._draft)
        if not result.valid:
            logger.debug("Rejected user draft: %s", "; ".join(result.errors))
            raise ValidationError(result.errors)
        return UserEntity.model_validate(
            {"name": self._draft.name, "age": self._draft.age},
            context={_BRAND_KEY: _FACTORY_TOKEN},
        )


class UserFactory:
    """Sole supplier of builders and sole origin of validated users."""

    def create(self, name: str, age: int) -> UserBuilder:
        """Start a builder from raw field values."""
        return UserBuilder(UserDraft(name=name, age=age))

    def from_primitive(self, primitive: Mapping[str, Any]) -> UserBuilder:
        """Start a builder from a plain ``{"name", "age"}`` record."""
        return self.create(primitive["name"], primitive["age"])

    @staticmethod
    def to_primitive(entity: UserEntity) -> UserPrimitive:
        """Project *entity* to a new plain dict for serialization."""
        return UserPrimitive(name=entity.name, age=entity.age)


user_factory = UserFactory()
