from typing import AsyncGenerator, Dict, Any, List

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from app.db.session import get_session, get_session_factory
from app.main import app
from app.models.book_model import Book
from app.utils.deps import get_stream_delay

# --- Test Database Setup ---
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Short enough to keep the suite fast, long enough to observe pacing.
TEST_STREAM_DELAY = 0.05


# --- Pytest Fixtures ---


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """
    A fresh in-memory database per test. StaticPool keeps every session on
    the same connection so they all see the same tables.
    """
    engine = create_async_engine(TEST_DATABASE_URL, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest_asyncio.fixture(scope="function")
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def stream_delay() -> float:
    return TEST_STREAM_DELAY


@pytest_asyncio.fixture(scope="function")
async def test_client(
    session_factory, stream_delay: float
) -> AsyncGenerator[AsyncClient, None]:
    """
    Provides an HTTP client for API testing, overriding the DB and stream
    delay dependencies.
    """

    async def override_get_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    app.dependency_overrides[get_stream_delay] = lambda: stream_delay

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client

    app.dependency_overrides.clear()


# --- Test Data Fixtures ---


@pytest.fixture
def sample_book_data() -> Dict[str, Any]:
    """A wire-shaped (camelCase) book payload without an id."""
    return {
        "author": "A",
        "title": "T",
        "description": "D",
        "coverImage": "C",
        "publicationYear": 2000,
    }


@pytest_asyncio.fixture
async def sample_book(db_session: AsyncSession) -> Book:
    book = Book(
        author="F. Scott Fitzgerald",
        title="The Great Gatsby",
        description="A novel about the American dream.",
        cover_image="https://example.com/gatsby.jpg",
        publication_year=1925,
    )
    db_session.add(book)
    await db_session.commit()
    await db_session.refresh(book)
    return book


@pytest_asyncio.fixture
async def multiple_books(db_session: AsyncSession) -> List[Book]:
    books = [
        Book(
            author=f"Author {i}",
            title=f"Title {i}",
            description=f"Description {i}",
            cover_image=f"https://example.com/{i}.jpg",
            publication_year=2000 + i,
        )
        for i in range(3)
    ]
    db_session.add_all(books)
    await db_session.commit()

    for book in books:
        await db_session.refresh(book)

    return books
