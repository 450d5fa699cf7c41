"""Contacts Router - Wix contact list, create, update and delete.

Errors raised by the service are turned into the uniform
``{"error": ..., "details": ...}`` envelope by the handlers in api.main.
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_contact_service, serialize_contact
from api.models import ContactCreateRequest, ContactUpdateRequest
from contacts_proxy.contacts import ContactService

router = APIRouter()


@router.get("")
def list_contacts(
    search: Optional[str] = Query(None, description="Case-insensitive first-name filter."),
    service: ContactService = Depends(get_contact_service),
) -> dict:
    """List contacts, optionally filtered by first name."""
    contacts = service.list_contacts(search)
    return {"items": [serialize_contact(contact) for contact in contacts]}


@router.post("")
def create_contact(
    request: ContactCreateRequest,
    service: ContactService = Depends(get_contact_service),
) -> dict:
    """Create a contact from any non-empty combination of name and email."""
    contact = service.create_contact(
        first_name=request.first_name,
        last_name=request.last_name,
        email=request.email,
    )
    return {
        "id": contact.id,
        "revision": contact.revision,
        "item": serialize_contact(contact),
    }


@router.patch("/{contact_id}")
def update_contact(
    contact_id: str,
    request: ContactUpdateRequest,
    service: ContactService = Depends(get_contact_service),
) -> dict:
    """Update a contact. The caller must echo the revision it last saw."""
    contact = service.update_contact(
        contact_id,
        first_name=request.first_name,
        last_name=request.last_name,
        email=request.email,
        revision=request.revision,
    )
    return {"id": contact.id, "revision": contact.revision}


@router.delete("/{contact_id}")
def delete_contact(
    contact_id: str,
    service: ContactService = Depends(get_contact_service),
) -> dict:
    """Delete a contact. Wix takes no revision here."""
    service.delete_contact(contact_id)
    return {"ok": True}
