"""Product variant Pydantic schemas."""


from datetime import datetime

from pydantic import Field

from storefront.schemas.common import CamelModel

class VariantOptions(CamelModel):
    color: str
    material: str
    size: str

class VariantCreate(CamelModel):
    sku: str = Field(min_length=3, max_length=50)
    options: VariantOptions | None = None
    price: float | None = Field(default=None, ge=0)

class VariantUpdate(CamelModel):
    sku: str | None = Field(default=None, min_length=3, max_length=50)
    options: VariantOptions | None = None
    price: float | None = Field(default=None, ge=0)

class VariantOut(CamelModel):
    id: str
    product_id: str
    sku: str
    options: VariantOptions | None = None
    price: float | None = None
    created_at: datetime
    updated_at: datetime
