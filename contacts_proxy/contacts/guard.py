"""Optimistic concurrency on contact updates."""
from __future__ import annotations

import logging
from typing import Any, Dict, Union
from urllib import parse as urlparse

from ..errors import ConcurrencyConflict, UpstreamError, ValidationError

logger = logging.getLogger(__name__)

CONTACTS_PATH = "/contacts/v4/contacts"
CONFLICT_STATUSES = frozenset({409, 412})

Revision = Union[str, int, None]


def contact_path(contact_id: str) -> str:
    return f"{CONTACTS_PATH}/{urlparse.quote(str(contact_id), safe='')}"


def _mentions_revision(value: Any) -> bool:
    return isinstance(value, str) and "revision" in value.lower()


def is_revision_conflict(error: UpstreamError) -> bool:
    """True when a Wix rejection was caused by a stale revision.

    An error code in the body decides. The 409/412 status only counts when
    Wix sent no code, since other rejections (duplicate email, for one)
    share those statuses.
    """
    details = error.details if isinstance(error.details, dict) else {}
    nested = details.get("details")
    application_error = nested.get("applicationError") if isinstance(nested, dict) else None
    if not isinstance(application_error, dict):
        application_error = {}

    codes = [
        code
        for code in (application_error.get("code"), details.get("code"))
        if isinstance(code, str) and code
    ]
    if codes:
        return any(_mentions_revision(code) for code in codes)

    if error.status in CONFLICT_STATUSES:
        return True
    candidates = (details.get("message"), application_error.get("description"))
    return any(_mentions_revision(candidate) for candidate in candidates)


class ConcurrencyGuard:
    """Forwards the caller's revision to Wix and classifies stale-revision rejections.

    No revision bookkeeping happens here; Wix alone decides whether a revision
    is current.
    """

    def __init__(self, client) -> None:
        self.client = client

    @staticmethod
    def require_revision(revision: Revision) -> str:
        if revision is None or isinstance(revision, bool):
            raise ValidationError("Missing revision.")
        token = str(revision).strip()
        if not token:
            raise ValidationError("Missing revision.")
        return token

    def submit_update(
        self, contact_id: str, payload: Dict[str, Any], revision: Revision
    ) -> Any:
        token = self.require_revision(revision)
        try:
            return self.client.call(
                contact_path(contact_id),
                "PATCH",
                body=payload,
                params={"revision": token},
            )
        except UpstreamError as exc:
            if isinstance(exc, ConcurrencyConflict) or not is_revision_conflict(exc):
                raise
            logger.info(
                "Revision %s for contact %s is stale (Wix status %s)",
                token,
                contact_id,
                exc.status,
            )
            raise ConcurrencyConflict(
                exc.message, status=exc.status, details=exc.details
            ) from exc
