from storefront.domain.tax import Tax
from storefront.repositories.base import BaseRepository


class TaxRepository(BaseRepository[Tax]):
    model = Tax
