"""v1 router package — all /api/v1/* endpoints live here.

Files:
  products.py  — REFERENCE router pattern (copy when adding resources)
  categories.py, sellers.py, taxes.py, roles.py, users.py, orders.py, addresses.py

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to storefront/services/.
"""

from fastapi import APIRouter

from storefront.routers.v1.addresses import router as addresses_router
from storefront.routers.v1.categories import router as categories_router
from storefront.routers.v1.orders import router as orders_router
from storefront.routers.v1.products import router as products_router
from storefront.routers.v1.roles import router as roles_router
from storefront.routers.v1.sellers import router as sellers_router
from storefront.routers.v1.taxes import router as taxes_router
from storefront.routers.v1.users import router as users_router

api_router = APIRouter()
for _router in (
    products_router,
    categories_router,
    sellers_router,
    taxes_router,
    roles_router,
    users_router,
    orders_router,
    addresses_router,
):
    api_router.include_router(_router)
