"""
Pydantic schemas for address payloads.

Every field is optional at the schema level: presence checks belong to
the service layer, which answers a missing field with a field specific
message instead of a framework validation error.  Field names follow
the camelCase wire format used by existing clients.
"""

from typing import Optional

from pydantic import BaseModel, Field


class AddressPayload(BaseModel):
    """Address fields as sent by clients for insert, edit and delete."""

    id: Optional[str] = Field(None, description="Identifier of an existing address (edit and delete)")
    firstName: Optional[str] = Field(None, description="First name")
    lastName: Optional[str] = Field(None, description="Last name")
    birthday: Optional[str] = Field(None, description="Birthday, free form")
    telephone: Optional[str] = Field(None, description="Telephone number")


class AddressRequest(BaseModel):
    """Request envelope ``{"address": {...}}``."""

    address: AddressPayload = Field(default_factory=AddressPayload)

