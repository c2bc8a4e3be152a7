"""Order Pydantic schemas."""


from datetime import datetime
from typing import Literal

from pydantic import Field

from storefront.schemas.common import CamelModel

OrderStatus = Literal["PENDING", "PROCESSING", "SHIPPED", "DELIVERED", "CANCELLED"]

class OrderCreate(CamelModel):
    user_id: str
    total: float = Field(default=0, ge=0)
    status: OrderStatus = "PENDING"

class OrderUpdate(CamelModel):
    status: OrderStatus

class OrderOut(CamelModel):
    id: str
    user_id: str
    status: str
    total: float
    created_at: datetime
    updated_at: datetime
