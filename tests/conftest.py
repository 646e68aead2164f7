"""Shared pytest fixtures for userkit tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
import structlog

from userkit.domain.user import UserFactory
from userkit.services.users import UserService


@pytest.fixture
def factory() -> UserFactory:
    """A fresh factory instance."""
    return UserFactory()


@pytest.fixture
def service(factory: UserFactory) -> UserService:
    """UserService bound to the fresh factory."""
    return UserService(factory)


@pytest.fixture
def restore_logging() -> Generator[None]:
    """Restore ``userkit`` logger and structlog state after the test."""
    userkit_logger = logging.getLogger("userkit")
    original_handlers = userkit_logger.handlers[:]
    original_level = userkit_logger.level
    yield
    userkit_logger.handlers = original_handlers
    userkit_logger.setLevel(original_level)
    structlog.reset_defaults()
