"""Contact operations composed over the Wix client."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ..errors import ValidationError
from .guard import CONTACTS_PATH, ConcurrencyGuard, Revision, contact_path
from .normalize import Contact, extract_documents, normalize
from .search import filter_contacts

logger = logging.getLogger(__name__)

PAGE_SIZE = 50
QUERY_PATH = f"{CONTACTS_PATH}/query"


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


def build_info_payload(
    *,
    first_name: Optional[str],
    last_name: Optional[str],
    email: Optional[str],
) -> Dict[str, Any]:
    """Build the Wix ``info`` payload.

    Name parts passed as None are left out. The ``emails`` structure is only
    present when an email is given: Wix treats an empty list differently from
    an absent one.
    """
    name: Dict[str, str] = {}
    if first_name is not None:
        name["first"] = first_name
    if last_name is not None:
        name["last"] = last_name

    info: Dict[str, Any] = {}
    if name:
        info["name"] = name
    if email:
        info["emails"] = {"items": [{"email": email}]}
    return {"info": info}


def _require_id(contact_id: str) -> str:
    cleaned = _clean(contact_id)
    if not cleaned:
        raise ValidationError("Missing contact id.")
    return cleaned


class ContactService:
    """List, create, update and delete Wix contacts as canonical values.

    Args:
        client: Anything exposing ``call(path, method, *, body=None, params=None)``,
            normally a :class:`~contacts_proxy.wix_client.WixClient`.
        guard: Revision guard for updates. Built from ``client`` when omitted.
        page_size: Fixed number of contacts requested per list call.
    """

    def __init__(
        self,
        client,
        *,
        guard: Optional[ConcurrencyGuard] = None,
        page_size: int = PAGE_SIZE,
    ) -> None:
        self.client = client
        self.guard = guard or ConcurrencyGuard(client)
        self.page_size = page_size

    def list_contacts(self, search: Optional[str] = None) -> List[Contact]:
        response = self.client.call(
            QUERY_PATH, "POST", body={"paging": {"limit": self.page_size}}
        )
        contacts = [normalize(document) for document in extract_documents(response)]
        filtered = filter_contacts(contacts, search)
        logger.info(
            "Listed %d contacts from Wix, %d after search filter",
            len(contacts),
            len(filtered),
        )
        return filtered

    def create_contact(
        self,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> Contact:
        first, last, address = _clean(first_name), _clean(last_name), _clean(email)
        if not (first or last or address):
            raise ValidationError("At least one of name/email is required.")

        payload = build_info_payload(first_name=first, last_name=last, email=address)
        created = self.client.call(CONTACTS_PATH, "POST", body=payload)
        contact = normalize(created)
        logger.info("Created contact %s", contact.id or "<no id echoed>")
        return contact

    def update_contact(
        self,
        contact_id: str,
        *,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        email: Optional[str] = None,
        revision: Revision = None,
    ) -> Contact:
        """Apply an update guarded by ``revision``.

        Returns the contact as confirmed by Wix, carrying its new revision.

        Raises:
            ValidationError: missing id or revision; nothing is sent.
            ConcurrencyConflict: Wix holds a newer revision.
        """
        contact_id = _require_id(contact_id)
        ConcurrencyGuard.require_revision(revision)

        payload = build_info_payload(
            first_name=None if first_name is None else first_name.strip(),
            last_name=None if last_name is None else last_name.strip(),
            email=_clean(email),
        )
        updated = self.guard.submit_update(contact_id, payload, revision)
        contact = normalize(updated)
        if not contact.id:
            contact.id = contact_id
        logger.info("Updated contact %s to revision %s", contact.id, contact.revision)
        return contact

    def delete_contact(self, contact_id: str) -> None:
        # Wix does not take a revision on delete, so this is unconditional.
        contact_id = _require_id(contact_id)
        self.client.call(contact_path(contact_id), "DELETE")
        logger.info("Deleted contact %s", contact_id)
