"""Schema base shared by every storefront resource, plus the health payload."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for request and response bodies: snake_case in Python, camelCase on the wire."""

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
        "from_attributes": True,
    }


class HealthResponse(CamelModel):
    """Health-check response returned by /health; status is "degraded" when the database is down."""

    status: str = "ok"
    app: str
    env: str
    version: str
    database: str = "ok"
