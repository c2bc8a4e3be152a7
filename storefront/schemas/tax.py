"""Tax Pydantic schemas."""


from datetime import datetime

from pydantic import Field

from storefront.schemas.common import CamelModel

class TaxCreate(CamelModel):
    country: str = Field(min_length=2, max_length=3)
    state: str | None = Field(default=None, min_length=1, max_length=50)
    rate: float = Field(ge=0, le=1)

class TaxUpdate(CamelModel):
    country: str | None = Field(default=None, min_length=2, max_length=3)
    state: str | None = Field(default=None, min_length=1, max_length=50)
    rate: float | None = Field(default=None, ge=0, le=1)

class TaxOut(CamelModel):
    id: str
    country: str
    state: str | None = None
    rate: float
    created_at: datetime
    updated_at: datetime
