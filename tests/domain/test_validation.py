"""Tests for user validation rules and ValidationResult."""

from dataclasses import FrozenInstanceError

import pytest

from userkit.domain.user import UserDraft
from userkit.domain.validation import (
    AGE_NEGATIVE,
    NAME_EMPTY,
    USER_RULES,
    ValidationResult,
    validate_user,
)


class TestValidateUser:
    @pytest.mark.parametrize(
        "name,age,expected",
        [
            ("Alice", 18, []),
            ("Alice", 0, []),
            ("", 18, [NAME_EMPTY]),
            ("   ", 18, [NAME_EMPTY]),
            ("\t\n", 18, [NAME_EMPTY]),
            ("Bob", -1, [AGE_NEGATIVE]),
            ("", -1, [NAME_EMPTY, AGE_NEGATIVE]),
            (" ", -100, [NAME_EMPTY, AGE_NEGATIVE]),
        ],
    )
    def test_rule_table(self, name: str, age: int, expected: list[str]) -> None:
        result = validate_user(UserDraft(name=name, age=age))
        assert result.errors == expected
        assert result.valid is (expected == [])

    def test_padded_name_is_valid(self) -> None:
        assert validate_user(UserDraft(name="  Alice  ", age=1)).valid

    def test_messages(self) -> None:
        assert NAME_EMPTY == "Name cannot be empty."
        assert AGE_NEGATIVE == "Age cannot be negative."

    def test_rule_order(self) -> None:
        """Name rule reports before age rule."""
        assert [message for _, message in USER_RULES] == [NAME_EMPTY, AGE_NEGATIVE]


class TestValidationResult:
    def test_valid_result(self) -> None:
        r = ValidationResult(valid=True)
        assert r.valid
        assert r.errors == []

    def test_invalid_result(self) -> None:
        r = ValidationResult(valid=False, errors=["bad"])
        assert not r.valid
        assert r.errors == ["bad"]

    def test_frozen(self) -> None:
        r = ValidationResult(valid=True)
        with pytest.raises(FrozenInstanceError):
            r.valid = False  # type: ignore[misc]
