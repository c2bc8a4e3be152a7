"""Repositories package — the only layer that builds SQLAlchemy queries.

Files:
  base.py     — BaseRepository (tenant filter, soft delete, sorted pagination)
  product.py  — REFERENCE repository pattern
  variant.py  — ProductVariantRepository
"""
