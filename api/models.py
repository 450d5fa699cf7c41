"""Request models for the contacts API."""
from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ContactCreateRequest(BaseModel):
    """Request body for creating a contact. At least one field must be non-empty."""
    model_config = ConfigDict(populate_by_name=True)

    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    email: Optional[str] = None


class ContactUpdateRequest(BaseModel):
    """Request body for updating a contact.

    ``revision`` is the token the caller last observed. It is optional here so
    that its absence is reported as a missing revision, not a schema error.
    """
    model_config = ConfigDict(populate_by_name=True)

    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    email: Optional[str] = None
    revision: Optional[Union[str, int]] = Field(
        None, description="Revision last observed by the caller."
    )
