"""Unified settings: init kwargs and env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs: values passed by the embedding application
  2. Env vars: ``USERKIT_*`` prefix
  3. Code defaults

Pass an instance to :func:`userkit.config.logging.configure_logging` to apply it.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class UserkitSettings(BaseSettings):
    """Runtime settings for userkit.

    Attributes:
        verbose: Emit DEBUG logs from the ``userkit`` logger tree.
        log_json: Render logs as JSON lines instead of console output.
    """

    model_config = SettingsConfigDict(frozen=True, env_prefix="USERKIT_")

    verbose: bool = False
    log_json: bool = False
