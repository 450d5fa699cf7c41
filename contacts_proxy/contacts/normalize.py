"""Map the many Wix contact shapes onto one canonical Contact."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Tuple, Union

PathKey = Union[str, int]
Path = Tuple[PathKey, ...]

# Resolution order matters: different Wix responses populate different paths.
ID_PATHS: Tuple[Path, ...] = (
    ("_id",),
    ("id",),
    ("contactId",),
)
REVISION_PATHS: Tuple[Path, ...] = (
    ("revision",),
    ("contact", "revision"),
    ("revisionNumber",),
)
FIRST_NAME_PATHS: Tuple[Path, ...] = (
    ("info", "name", "first"),
    ("info", "name", "firstName"),
    ("primaryInfo", "firstName"),
)
LAST_NAME_PATHS: Tuple[Path, ...] = (
    ("info", "name", "last"),
    ("info", "name", "lastName"),
)
EMAIL_PATHS: Tuple[Path, ...] = (
    ("primaryEmail", "email"),
    ("info", "emails", "items", 0, "email"),
    ("primaryInfo", "email"),
)


@dataclass
class Contact:
    """Canonical contact snapshot. Wix owns the authoritative record."""
    id: str = ""
    revision: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    raw: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self, *, include_raw: bool = True) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "revision": self.revision,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
        }
        if include_raw:
            data["raw"] = self.raw
        return data


def lookup(document: Any, path: Sequence[PathKey]) -> Any:
    """Walk ``path`` through nested dicts/lists; None when any step is missing."""
    current = document
    for key in path:
        if isinstance(key, int):
            if not isinstance(current, list) or not -len(current) <= key < len(current):
                return None
            current = current[key]
        else:
            if not isinstance(current, dict):
                return None
            current = current.get(key)
        if current is None:
            return None
    return current


def resolve(document: Any, paths: Sequence[Path]) -> str:
    """Return the first non-empty scalar found along ``paths`` as a string."""
    for path in paths:
        value = lookup(document, path)
        if value is None or value == "" or isinstance(value, (dict, list)):
            continue
        return value if isinstance(value, str) else str(value)
    return ""


def unwrap(document: Any) -> Dict[str, Any]:
    """Strip one ``{"contact": {...}}`` wrapper if present."""
    if not isinstance(document, dict):
        return {}
    inner = document.get("contact")
    if isinstance(inner, dict):
        return inner
    return document


def normalize(document: Any) -> Contact:
    """Build a Contact from any Wix contact document. Never raises."""
    doc = unwrap(document)
    return Contact(
        id=resolve(doc, ID_PATHS),
        revision=resolve(doc, REVISION_PATHS),
        first_name=resolve(doc, FIRST_NAME_PATHS),
        last_name=resolve(doc, LAST_NAME_PATHS),
        email=resolve(doc, EMAIL_PATHS),
        raw=doc,
    )


def extract_documents(response: Any) -> List[Any]:
    """Pull the contact list out of a query response (``contacts`` or ``items``)."""
    if not isinstance(response, dict):
        return []
    for key in ("contacts", "items"):
        documents = response.get(key)
        if isinstance(documents, list):
            return documents
    return []
