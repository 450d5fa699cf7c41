"""Wix Contacts REST connector."""
from __future__ import annotations

import http.client
import json
import logging
from typing import Any, Dict, Optional
from urllib import error as urlerror
from urllib import parse as urlparse
from urllib import request as urlrequest

from .config import ConfigError, Settings
from .errors import TransportError, UpstreamError

logger = logging.getLogger(__name__)


def parse_body(text: str) -> Any:
    """Parse a response body without ever raising.

    Empty bodies yield None and non-JSON bodies are wrapped as {"raw": text}.
    Wix error bodies are not guaranteed to be JSON.
    """
    if not text:
        return None
    try:
        return json.loads(text)
    except ValueError:
        return {"raw": text}


def _error_message(status: int, details: Any) -> str:
    if isinstance(details, dict):
        message = details.get("message")
        if isinstance(message, str) and message:
            return message
    return f"Wix API error: {status}"


class WixClient:
    """Small Wix REST wrapper that authenticates every call."""

    def __init__(self, settings: Settings, *, timeout_seconds: Optional[int] = None) -> None:
        self.settings = settings
        self.base_url = settings.wix_base_url.rstrip("/")
        self.timeout_seconds = (
            timeout_seconds if timeout_seconds is not None else settings.timeout_seconds
        )

    def headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Authorization": f"Bearer {self.settings.wix_api_key}",
            "wix-account-id": self.settings.wix_account_id,
            "wix-site-id": self.settings.wix_site_id,
        }

    def call(
        self,
        path: str,
        method: str = "GET",
        *,
        body: Optional[Any] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Issue one request against the Wix API and return the parsed body.

        Raises:
            ConfigError: if no API key is configured. Nothing is sent.
            UpstreamError: if Wix answers with a non-success status.
            TransportError: if the request could not complete.
        """
        if not self.settings.has_api_key:
            raise ConfigError(
                "Missing Wix API key. Export WIX_API_KEY or add it to .env."
            )

        url = f"{self.base_url}{path}"
        if params:
            url = f"{url}?{urlparse.urlencode(params)}"

        data: Optional[bytes] = None
        if body is not None:
            data = json.dumps(body).encode("utf-8")

        logger.debug(
            "Wix %s %s (site=%s, account=%s, key=%s)",
            method,
            path,
            self.settings.wix_site_id or "<missing>",
            self.settings.wix_account_id or "<missing>",
            self.settings.masked_api_key(),
        )
        req = urlrequest.Request(url, data=data, method=method, headers=self.headers())

        try:
            with urlrequest.urlopen(req, timeout=self.timeout_seconds) as resp:
                raw = resp.read().decode("utf-8", errors="replace")
        except urlerror.HTTPError as exc:
            detail_text = exc.read().decode("utf-8", errors="replace")
            details = parse_body(detail_text)
            logger.warning("Wix %s %s failed with status %s", method, path, exc.code)
            raise UpstreamError(
                _error_message(exc.code, details), status=exc.code, details=details
            ) from exc
        except urlerror.URLError as exc:
            raise TransportError(
                f"Network error calling Wix: {exc.reason}", cause=exc
            ) from exc
        except (http.client.HTTPException, OSError) as exc:
            raise TransportError(f"Network error calling Wix: {exc}", cause=exc) from exc

        return parse_body(raw)
