"""Product repository — REFERENCE pattern for all repositories.

How to add a new repository:
  1. Create storefront/repositories/my_entity.py
  2. class MyEntityRepository(BaseRepository[MyEntity]):
         model = MyEntity
  3. Add any domain-specific query methods as needed
"""


from storefront.domain.product import Product
from storefront.repositories.base import BaseRepository


class ProductRepository(BaseRepository[Product]):
    model = Product
