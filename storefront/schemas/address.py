"""Address Pydantic schemas."""


from datetime import datetime
from typing import Literal

from pydantic import Field

from storefront.schemas.common import CamelModel

AddressType = Literal["HOME", "WORK", "OTHER"]

class AddressCreate(CamelModel):
    user_id: str
    address_line1: str = Field(min_length=1, max_length=255)
    address_line2: str | None = Field(default=None, max_length=255)
    city: str = Field(min_length=2, max_length=50)
    postal_code: str = Field(min_length=4, max_length=10)
    country: str = Field(min_length=2, max_length=50)
    telephone: str | None = Field(default=None, min_length=10, max_length=15)
    mobile: str | None = Field(default=None, min_length=10, max_length=15)
    address_type: AddressType = "HOME"

class AddressUpdate(CamelModel):
    address_line1: str | None = Field(default=None, min_length=1, max_length=255)
    address_line2: str | None = Field(default=None, max_length=255)
    city: str | None = Field(default=None, min_length=2, max_length=50)
    postal_code: str | None = Field(default=None, min_length=4, max_length=10)
    country: str | None = Field(default=None, min_length=2, max_length=50)
    telephone: str | None = Field(default=None, min_length=10, max_length=15)
    mobile: str | None = Field(default=None, min_length=10, max_length=15)
    address_type: AddressType | None = None

class AddressOut(CamelModel):
    id: str
    user_id: str
    address_line1: str
    address_line2: str | None = None
    city: str
    postal_code: str
    country: str
    telephone: str | None = None
    mobile: str | None = None
    address_type: str
    created_at: datetime
    updated_at: datetime
