"""Tests for UserkitSettings."""

import pydantic
import pytest

from userkit.config.settings import UserkitSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("USERKIT_VERBOSE", raising=False)
    monkeypatch.delenv("USERKIT_LOG_JSON", raising=False)


class TestUserkitSettings:
    def test_defaults(self) -> None:
        settings = UserkitSettings()
        assert settings.verbose is False
        assert settings.log_json is False

    def test_env_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("USERKIT_VERBOSE", "true")
        monkeypatch.setenv("USERKIT_LOG_JSON", "1")
        settings = UserkitSettings()
        assert settings.verbose is True
        assert settings.log_json is True

    def test_init_kwargs_beat_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("USERKIT_VERBOSE", "true")
        assert UserkitSettings(verbose=False).verbose is False

    def test_frozen(self) -> None:
        settings = UserkitSettings()
        with pytest.raises(pydantic.ValidationError):
            settings.verbose = True  # type: ignore[misc]
