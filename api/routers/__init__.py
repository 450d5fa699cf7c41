"""API Routers Package.

Routers:
- contacts.py: contact list/create/update/delete, mounted at /api/contacts

Usage in main.py:
    from api.routers import contacts_router

    app.include_router(contacts_router, prefix="/api/contacts", tags=["contacts"])
"""

from .contacts import router as contacts_router

__all__ = [
    "contacts_router",
]
