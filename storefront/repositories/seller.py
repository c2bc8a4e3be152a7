from storefront.domain.seller import Seller
from storefront.repositories.base import BaseRepository


class SellerRepository(BaseRepository[Seller]):
    model = Seller
