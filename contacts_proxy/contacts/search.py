"""Local first-name search over normalized contacts."""
from __future__ import annotations

from typing import Iterable, List, Optional

from .normalize import Contact


def normalize_term(term: Optional[str]) -> str:
    return (term or "").strip().lower()


def matches(contact: Contact, term: str) -> bool:
    """Case-insensitive substring match against the first name only."""
    return term in (contact.first_name or "").lower()


def filter_contacts(contacts: Iterable[Contact], term: Optional[str]) -> List[Contact]:
    """Keep contacts whose first name contains ``term``.

    Runs after normalization and never goes upstream; Wix query semantics do
    not match substring search. An empty term returns every contact in order.
    """
    items = list(contacts)
    needle = normalize_term(term)
    if not needle:
        return items
    return [contact for contact in items if matches(contact, needle)]
