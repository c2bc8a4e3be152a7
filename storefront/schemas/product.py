"""Product Pydantic schemas (request DTOs and response models)."""


from datetime import datetime

from pydantic import Field

from storefront.schemas.common import CamelModel

class ProductCreate(CamelModel):
    name: str = Field(min_length=3, max_length=100)
    description: str | None = Field(default=None, min_length=10, max_length=1000)
    sku: str = Field(min_length=3, max_length=50)
    category_id: str | None = None
    price: float = Field(ge=0)
    brand: str | None = Field(default=None, max_length=50)
    tags: list[str] | None = None
    is_published: bool = False
    quantity: int = Field(default=0, ge=0)

class ProductUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=3, max_length=100)
    description: str | None = Field(default=None, min_length=10, max_length=1000)
    sku: str | None = Field(default=None, min_length=3, max_length=50)
    category_id: str | None = None
    price: float | None = Field(default=None, ge=0)
    brand: str | None = Field(default=None, max_length=50)
    tags: list[str] | None = None
    is_published: bool | None = None
    quantity: int | None = Field(default=None, ge=0)

class ProductOut(CamelModel):
    id: str
    client_id: str
    name: str
    description: str | None = None
    sku: str
    category_id: str | None = None
    price: float
    brand: str | None = None
    tags: list[str] | None = None
    is_published: bool
    average_rating: float
    quantity: int
    created_at: datetime
    updated_at: datetime
