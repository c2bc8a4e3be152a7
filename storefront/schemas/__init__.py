"""Pydantic schemas package.

Folder intent:
  common.py   — CamelModel base + HealthResponse (all schemas inherit CamelModel)
  product.py  — REFERENCE pattern (Create / Update / Out per resource)
  category.py, seller.py, tax.py, order.py, user.py, role.py, address.py
"""
