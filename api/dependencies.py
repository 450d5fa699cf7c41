"""Shared dependencies and helper functions for API routers.

Usage in routers:
    from api.dependencies import get_contact_service, serialize_contact
"""
from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from contacts_proxy.config import Settings, load_settings
from contacts_proxy.contacts import Contact, ContactService
from contacts_proxy.wix_client import WixClient


# =============================================================================
# Configuration Constants
# =============================================================================

LOCAL_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:5174",
    "http://127.0.0.1:5174",
]


def allowed_origins(settings: Settings) -> list[str]:
    origins = list(LOCAL_ORIGINS)
    if settings.allowed_frontend:
        origins.append(settings.allowed_frontend)
    return origins


# =============================================================================
# Cached Functions
# =============================================================================

@lru_cache
def get_settings() -> Settings:
    """Get application settings (cached for the process lifetime)."""
    return load_settings()


def get_wix_client(settings: Settings = Depends(get_settings)) -> WixClient:
    return WixClient(settings)


def get_contact_service(client: WixClient = Depends(get_wix_client)) -> ContactService:
    """Build a fresh service per request; nothing is shared between requests."""
    return ContactService(client)


# =============================================================================
# Serialization Helpers
# =============================================================================

def serialize_contact(contact: Contact) -> dict:
    """Serialize a normalized Contact to API response format."""
    return contact.to_dict()
