"""Services package — all business logic lives here, never in routers.

Files:
  base.py     — ResourceService (list with allow-listed sorting, CRUD, uniqueness)
  product.py  — REFERENCE service pattern
  variant.py  — product variants (nested under a product)
  catalog.py  — categories, sellers, taxes, roles, users, orders, addresses

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
