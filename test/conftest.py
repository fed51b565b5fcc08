"""
Pytest configuration and fixtures for the admin locale field tests
"""

import os
import sys
from collections.abc import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH119, PTH120

from admin_locale.config import LocaleConfig, get_locale_config  # noqa: E402
from admin_locale.database import Base, get_db  # noqa: E402
from admin_locale.models.page import Page  # noqa: E402
from admin_locale.resources.page import PageResource  # noqa: E402
from admin_locale.resources.registry import ResourceRegistry  # noqa: E402

# In-memory SQLite shared by every session through a single static connection
TEST_DATABASE_URL = "sqlite+aiosqlite://"

test_engine = create_async_engine(
    TEST_DATABASE_URL,
    echo=False,  # Set to True for SQL debugging
    poolclass=StaticPool,
    connect_args={"check_same_thread": False},
)

TestSessionLocal = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)

THREE_LOCALES = {"en": "English", "fr": "French", "de": "German"}
FIVE_LOCALES = {"en": "English", "fr": "French", "de": "German", "es": "Spanish", "it": "Italian"}


@pytest.fixture(scope="function")
async def setup_test_database():
    """Create a fresh schema for each test function that needs it."""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    # Each test runs in its own event loop; don't carry the connection over
    await test_engine.dispose()


@pytest.fixture(scope="function")
async def test_db(setup_test_database) -> AsyncGenerator[AsyncSession, None]:
    async with TestSessionLocal() as session:
        yield session


@pytest.fixture
def locale_config() -> LocaleConfig:
    return LocaleConfig(locales=dict(THREE_LOCALES), max_locales_shown_on_index=4)


@pytest.fixture
def registry() -> ResourceRegistry:
    """A fresh registry holding only PageResource."""
    registry = ResourceRegistry()
    registry.register(PageResource)
    return registry


async def create_page(db: AsyncSession, title: str, locale: str, locale_parent_id: int | None = None) -> Page:
    page = Page(title=title, locale=locale, locale_parent_id=locale_parent_id)
    db.add(page)
    await db.commit()
    await db.refresh(page)
    return page


@pytest.fixture
async def page_group(test_db: AsyncSession) -> tuple[Page, Page]:
    """Record A (en, group root) and record B (fr, child of A)."""
    page_a = await create_page(test_db, "Home", "en")
    page_b = await create_page(test_db, "Accueil", "fr", locale_parent_id=page_a.id)
    return page_a, page_b


@pytest.fixture
async def api_client(setup_test_database, locale_config, registry):
    """httpx client bound to the app, using the test database, locale config and registry."""
    from httpx import ASGITransport, AsyncClient

    from admin_locale.routes.locale_field import get_resource_registry
    from main import app

    async def _override_get_db():
        async with TestSessionLocal() as session:
            yield session

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_locale_config] = lambda: locale_config
    app.dependency_overrides[get_resource_registry] = lambda: registry

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def make_page(test_db: AsyncSession):
    """Factory fixture: ``await make_page(title, locale, parent_id)``."""

    async def _make(title: str, locale: str, locale_parent_id: int | None = None) -> Page:
        return await create_page(test_db, title, locale, locale_parent_id)

    return _make
