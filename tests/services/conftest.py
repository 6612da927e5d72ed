"""Service test fixtures — async DB, fake repository and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched for the readiness probe, which bypasses get_db

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - StaticPool: every session shares the one in-memory connection
    - InMemoryBookRepository: service tests exercise BookService without SQL
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from app.db.base import Base
from app.infrastructure.database import get_db, DatabaseSessionManager
from app.models.book import build_book
import app.infrastructure.database as db_module
from app.main import app
from tests.services.fake_repository import InMemoryBookRepository, make_book


@pytest.fixture
def fake_repository():
    return InMemoryBookRepository([
        make_book(
            1, "Test driven development",
            "learn to write code with a test-first approach", 5,
        ),
        make_book(
            2, "Head first design patterns",
            "In depth view of software design patterns", 5,
        ),
        make_book(3, "Spring in action", "Guide to learn SpringBoot", 5),
    ])


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_books(test_db):
    """Insert the two scenario books: {1,"A",5} and {2,"B",5}."""
    books = [build_book("A", None, 5), build_book("B", None, 5)]
    test_db.add_all(books)
    await test_db.commit()
    for book in books:
        await test_db.refresh(book)
    return books
