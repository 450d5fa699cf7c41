"""Configuration helpers for the contacts proxy."""
from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.wixapis.com"


class ConfigError(RuntimeError):
    """Raised when required configuration is missing or malformed."""


@dataclass(frozen=True, slots=True)
class Settings:
    """Runtime configuration, loaded once at startup."""

    wix_api_key: str
    wix_account_id: str = ""
    wix_site_id: str = ""
    wix_base_url: str = DEFAULT_BASE_URL
    timeout_seconds: int = 15
    port: int = 4000
    environment: str = "local"
    allowed_frontend: Optional[str] = None

    @property
    def has_api_key(self) -> bool:
        return bool(self.wix_api_key)

    def masked_api_key(self) -> str:
        if not self.wix_api_key:
            return "<NOT SET>"
        return f"{self.wix_api_key[:8]}..."


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}.") from exc


def load_settings(*, use_dotenv: bool = True) -> Settings:
    """Load settings from the environment (and a local .env file).

    A missing WIX_API_KEY does not stop startup. It is logged here and every
    upstream call fails with ConfigError instead.

    Raises:
        ConfigError: if a numeric variable cannot be parsed.
    """

    if use_dotenv:
        load_dotenv()

    api_key = (os.getenv("WIX_API_KEY") or "").strip()
    if not api_key:
        logger.warning(
            "WIX_API_KEY not set in environment. Set it in .env before running."
        )

    return Settings(
        wix_api_key=api_key,
        wix_account_id=(os.getenv("WIX_ACCOUNT_ID") or "").strip(),
        wix_site_id=(os.getenv("WIX_SITE_ID") or "").strip(),
        wix_base_url=(os.getenv("WIX_BASE_URL") or DEFAULT_BASE_URL).rstrip("/"),
        timeout_seconds=_int_env("WIX_TIMEOUT_SECONDS", 15),
        port=_int_env("PORT", 4000),
        environment=os.getenv("CONTACTS_ENV", "local"),
        allowed_frontend=(os.getenv("CONTACTS_ALLOWED_FRONTEND") or "").strip() or None,
    )
