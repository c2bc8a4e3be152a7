"""Seller Pydantic schemas."""


from datetime import datetime
from typing import Literal

from pydantic import Field

from storefront.schemas.common import CamelModel

SellerStatus = Literal["PENDING", "APPROVED", "REJECTED", "SUSPENDED"]

class SellerCreate(CamelModel):
    business_name: str = Field(min_length=3, max_length=100)
    description: str | None = Field(default=None, min_length=10, max_length=1000)
    logo: str | None = None
    website: str | None = None
    tax_id: str | None = Field(default=None, min_length=1, max_length=50)
    commission_rate: float | None = Field(default=None, ge=0, le=100)

class SellerUpdate(CamelModel):
    business_name: str | None = Field(default=None, min_length=3, max_length=100)
    description: str | None = Field(default=None, min_length=10, max_length=1000)
    logo: str | None = None
    website: str | None = None
    tax_id: str | None = Field(default=None, min_length=1, max_length=50)
    status: SellerStatus | None = None
    commission_rate: float | None = Field(default=None, ge=0, le=100)

class SellerOut(CamelModel):
    id: str
    business_name: str
    description: str | None = None
    logo: str | None = None
    website: str | None = None
    tax_id: str | None = None
    commission_rate: float | None = None
    status: str
    rating: float
    total_sales: int
    created_at: datetime
    updated_at: datetime
