"""UserService: ServiceResult adapter over the user factory.

Callers that prefer not to handle exceptions go through this service:
every method returns a frozen :class:`ServiceResult`. Rule failures come
back as ``VALIDATION_FAILED``; primitive records with missing keys or
wrong types come back as ``INVALID_RECORD``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import pydantic
import structlog

from userkit.domain.errors import ValidationError
from userkit.domain.user import UserBuilder, UserFactory, user_factory
from userkit.services.contracts import (
    BuildBatchResultData,
    BuildUserResultData,
    UserRecord,
    dump_validated,
    record_errors,
)
from userkit.services.result import ServiceError, ServiceResult

log = structlog.get_logger(__name__)


class UserService:
    """Builds users through a :class:`UserFactory` (the shared one by default)."""

    def __init__(self, factory: UserFactory | None = None) -> None:
        self._factory = factory or user_factory

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def build_user(self, name: str, age: int) -> ServiceResult:
        """Build a user from raw field values."""
        return self._build(self._factory.create(name, age))

    def build_from_primitive(self, primitive: Mapping[str, Any]) -> ServiceResult:
        """Build a user from a plain ``{"name", "age"}`` record."""
        try:
            builder = self._builder_for(primitive)
        except pydantic.ValidationError as exc:
            messages = record_errors(exc)
            log.info("record.invalid", errors=messages)
            return ServiceResult(
                ok=False,
                op="build_user",
                error=ServiceError(
                    code="INVALID_RECORD",
                    message=f"Invalid user record: {', '.join(messages)}",
                    detail={"errors": messages},
                ),
            )
        return self._build(builder)

    def build_batch(
        self,
        primitives: Sequence[Mapping[str, Any]],
        *,
        partial: bool = False,
    ) -> ServiceResult:
        """Build multiple users. All-or-nothing unless *partial* is True.

        Malformed records and rule failures are reported the same way: one
        ``{"index", "errors"}`` row per rejected record.
        """
        users: list[dict[str, Any]] = []
        errors: list[dict[str, Any]] = []

        for i, primitive in enumerate(primitives):
            try:
                entity = self._builder_for(primitive).build()
            except pydantic.ValidationError as exc:
                messages = record_errors(exc)
                reason = f"Invalid user record: {', '.join(messages)}"
            except ValidationError as exc:
                messages = exc.errors
                reason = str(exc)
            else:
                users.append(dict(self._factory.to_primitive(entity)))
                continue

            errors.append({"index": i, "errors": messages})
            if not partial:
                log.info("batch.aborted", index=i, errors=messages)
                return ServiceResult(
                    ok=False,
                    op="build_batch",
                    error=ServiceError(
                        code="BATCH_FAILED",
                        message=f"Item {i} failed: {reason}",
                    ),
                    data=self._batch_data(users, errors),
                    meta={"total": len(primitives), "failed": len(errors)},
                )

        all_ok = len(errors) == 0
        log.debug("batch.complete", built=len(users), failed=len(errors))
        return ServiceResult(
            ok=all_ok,
            op="build_batch",
            data=self._batch_data(users, errors),
            error=ServiceError(
                code="BATCH_PARTIAL",
                message=f"{len(errors)} of {len(primitives)} items failed",
            )
            if not all_ok
            else None,
            meta={"total": len(primitives), "failed": len(errors)},
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _builder_for(self, primitive: Mapping[str, Any]) -> UserBuilder:
        """Check the record shape, then hand it to the factory.

        Raises:
            pydantic.ValidationError: missing key or wrong field type.
        """
        record = UserRecord.model_validate(primitive)
        return self._factory.from_primitive(record.model_dump())

    def _build(self, builder: UserBuilder) -> ServiceResult:
        try:
            entity = builder.build()
        except ValidationError as exc:
            log.info("user.rejected", errors=exc.errors)
            return ServiceResult(
                ok=False,
                op="build_user",
                error=ServiceError(
                    code="VALIDATION_FAILED",
                    message=str(exc),
                    detail={"errors": exc.errors},
                ),
            )

        log.debug("user.built", name=entity.name, age=entity.age)
        data = dump_validated(
            BuildUserResultData,
            {"user": self._factory.to_primitive(entity)},
        )
        return ServiceResult(ok=True, op="build_user", data=data)

    @staticmethod
    def _batch_data(users: list[dict[str, Any]], errors: list[dict[str, Any]]) -> dict[str, Any]:
        return dump_validated(
            BuildBatchResultData,
            {"count": len(users), "users": users, "errors": errors},
        )
