"""Allow-listed sort fields, one enumeration per listable resource.

Member values are the wire names accepted in ``?sortBy=``; ``column`` gives the
ORM attribute the value orders by. Both the list endpoints and the admin
client resolve raw strings through these enums.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, TypeVar

from pydantic.alias_generators import to_snake

from storefront.core.exceptions import InvalidSortFieldError

SortFieldT = TypeVar("SortFieldT", bound="SortField")


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class SortField(str, Enum):
    """Base for per-resource sort enumerations."""

    @property
    def column(self) -> str:
        return to_snake(self.value)

    @classmethod
    def choices(cls) -> list[str]:
        return [m.value for m in cls]

    @classmethod
    def parse(cls: type[SortFieldT], raw: Optional[str]) -> Optional[SortFieldT]:
        """Return the member for *raw*, or None when it is empty or unknown."""
        if not raw:
            return None
        try:
            return cls(raw)
        except ValueError:
            return None

    @classmethod
    def resolve(cls: type[SortFieldT], raw: Optional[str]) -> Optional[SortFieldT]:
        """Like :meth:`parse` but raises :class:`InvalidSortFieldError` for unknown names."""
        if not raw:
            return None
        member = cls.parse(raw)
        if member is None:
            raise InvalidSortFieldError(raw, cls.choices())
        return member


class ProductSortField(SortField):
    ID = "id"
    NAME = "name"
    PRICE = "price"
    IS_PUBLISHED = "isPublished"
    AVERAGE_RATING = "averageRating"
    CREATED_AT = "createdAt"


class CategorySortField(SortField):
    ID = "id"
    NAME = "name"
    CREATED_AT = "createdAt"


class SellerSortField(SortField):
    ID = "id"
    BUSINESS_NAME = "businessName"
    STATUS = "status"
    RATING = "rating"
    TOTAL_SALES = "totalSales"
    CREATED_AT = "createdAt"


class TaxSortField(SortField):
    ID = "id"
    COUNTRY = "country"
    STATE = "state"
    RATE = "rate"
    CREATED_AT = "createdAt"


class OrderSortField(SortField):
    ID = "id"
    STATUS = "status"
    TOTAL = "total"
    CREATED_AT = "createdAt"


class UserSortField(SortField):
    ID = "id"
    EMAIL = "email"
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    TELEPHONE = "telephone"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"


class RoleSortField(SortField):
    ID = "id"
    NAME = "name"
    CREATED_AT = "createdAt"


class AddressSortField(SortField):
    ID = "id"
    CITY = "city"
    COUNTRY = "country"
    POSTAL_CODE = "postalCode"
    CREATED_AT = "createdAt"


class VariantSortField(SortField):
    ID = "id"
    SKU = "sku"
    PRICE = "price"
    CREATED_AT = "createdAt"
