"""User Pydantic schemas (profile data only; credentials live elsewhere)."""


from datetime import datetime

from pydantic import Field

from storefront.schemas.common import CamelModel

class UserCreate(CamelModel):
    email: str = Field(min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    telephone: str | None = Field(default=None, min_length=10, max_length=15)

class UserUpdate(CamelModel):
    email: str | None = Field(default=None, min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)
    telephone: str | None = Field(default=None, min_length=10, max_length=15)
    is_active: bool | None = None

class UserOut(CamelModel):
    id: str
    email: str
    first_name: str
    last_name: str
    telephone: str | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime
