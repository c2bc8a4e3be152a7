"""Role Pydantic schemas."""


from datetime import datetime

from pydantic import Field

from storefront.schemas.common import CamelModel

class RoleCreate(CamelModel):
    name: str = Field(min_length=1, max_length=50)
    description: str | None = None

class RoleUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=50)
    description: str | None = None

class RoleOut(CamelModel):
    id: str
    name: str
    description: str | None = None
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None
