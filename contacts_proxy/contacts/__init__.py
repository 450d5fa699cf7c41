"""Contact normalization, search, concurrency guard and service."""
from .guard import ConcurrencyGuard, is_revision_conflict
from .normalize import Contact, extract_documents, normalize
from .search import filter_contacts
from .service import PAGE_SIZE, ContactService, build_info_payload

__all__ = [
    # Normalization
    "Contact",
    "normalize",
    "extract_documents",
    # Search
    "filter_contacts",
    # Concurrency
    "ConcurrencyGuard",
    "is_revision_conflict",
    # Service
    "ContactService",
    "build_info_payload",
    "PAGE_SIZE",
]
