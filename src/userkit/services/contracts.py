"""Typed payload contracts for the user service.

``UserRecord`` checks the shape of inbound primitive records before they
reach the factory. The ``*ResultData`` models validate payload shapes before
they leave the service layer, so key regressions (for example ``users`` vs
``items``) fail fast in tests.
"""

from __future__ import annotations

from typing import Any, TypeVar

import pydantic
from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


def record_errors(exc: pydantic.ValidationError) -> list[str]:
    """Flatten a record-shape failure into ``"<field>: <reason>"`` messages."""
    messages = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"])
        messages.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return messages


class UserRecord(BaseModel):
    """Inbound primitive record. Strict: ``"5"`` is not an age."""

    model_config = ConfigDict(strict=True)

    name: str
    age: int


class UserPayload(BaseModel):
    """Primitive user row."""

    name: str
    age: int


class BuildUserResultData(BaseModel):
    """Payload contract for ``UserService.build_user``."""

    user: UserPayload


class BatchFailure(BaseModel):
    """One rejected record in a batch build."""

    index: int
    errors: list[str]


class BuildBatchResultData(BaseModel):
    """Payload contract for ``UserService.build_batch``."""

    count: int
    users: list[UserPayload]
    errors: list[BatchFailure] = Field(default_factory=list)
