"""Exception hierarchy shared by the client, the service and the API."""
from __future__ import annotations

from typing import Any, Optional


class ContactsProxyError(RuntimeError):
    """Base class for every classified proxy failure."""

    status_code = 500

    def __init__(self, message: str, *, details: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(ContactsProxyError):
    """Locally detectable bad input. No upstream call was made."""

    status_code = 400


class UpstreamError(ContactsProxyError):
    """Wix answered with a non-success HTTP status."""

    status_code = 502

    def __init__(
        self, message: str, *, status: int, details: Any = None
    ) -> None:
        super().__init__(message, details=details)
        self.status = status


class ConcurrencyConflict(UpstreamError):
    """Wix rejected an update because the supplied revision is stale."""

    status_code = 409


class TransportError(ContactsProxyError):
    """The request to Wix could not complete (DNS, refused, reset, timeout)."""

    status_code = 503

    def __init__(self, message: str, *, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause
