from storefront.domain.order import Order
from storefront.repositories.base import BaseRepository


class OrderRepository(BaseRepository[Order]):
    model = Order
    # Orders are listed newest first; status updates must not reshuffle them
    default_ordering = "created_at"
