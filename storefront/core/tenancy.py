"""Tenant resolution for request handlers."""


from typing import Optional

from fastapi import Header

from storefront.core.config import settings


def get_client_id(
    x_client_id: Optional[str] = Header(default=None, alias="X-Client-ID"),
) -> str:
    """Tenant from the X-Client-ID header, else the configured default tenant."""
    return x_client_id or settings.default_client_id
