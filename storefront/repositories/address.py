from storefront.domain.address import Address
from storefront.repositories.base import BaseRepository


class AddressRepository(BaseRepository[Address]):
    model = Address
