"""Category Pydantic schemas."""


from datetime import datetime

from pydantic import Field

from storefront.schemas.common import CamelModel

class CategoryCreate(CamelModel):
    name: str = Field(min_length=2, max_length=50)
    description: str | None = Field(default=None, min_length=10, max_length=500)
    image_url: str | None = None

class CategoryUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=2, max_length=50)
    description: str | None = Field(default=None, min_length=10, max_length=500)
    image_url: str | None = None

class CategoryOut(CamelModel):
    id: str
    name: str
    description: str | None = None
    image_url: str | None = None
    created_at: datetime
    updated_at: datetime
