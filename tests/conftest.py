"""Shared fixtures: in-memory database per test and an ASGI client bound to it."""
import os

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import storefront.domain  # noqa: F401
from storefront.core.config import settings
from storefront.db.base import Base, get_db
from storefront.domain import Product
from storefront.main import app

TENANT = settings.default_client_id


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return async_sessionmaker(
        bind=engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as s:
        yield s


@pytest_asyncio.fixture
async def client(session_factory):
    async def _get_db():
        async with session_factory() as s:
            try:
                yield s
                await s.commit()
            except Exception:
                await s.rollback()
                raise

    app.dependency_overrides[get_db] = _get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def seed_products(session_factory):
    """Insert *count* products; product N is modified N minutes after the epoch below."""

    async def _seed(count: int, client_id: str = TENANT) -> list[Product]:
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)
        products = [
            Product(
                client_id=client_id,
                name=f"Product {i:02d}",
                sku=f"SKU-{client_id}-{i:03d}",
                price=Decimal(str(100 - i)),
                is_published=i % 2 == 0,
                average_rating=Decimal("4.5") if i % 3 == 0 else Decimal("3.0"),
                created_at=base + timedelta(minutes=i),
                updated_at=base + timedelta(minutes=i),
            )
            for i in range(1, count + 1)
        ]
        async with session_factory() as s:
            s.add_all(products)
            await s.commit()
        return products

    return _seed
