from storefront.domain.category import Category
from storefront.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    model = Category
