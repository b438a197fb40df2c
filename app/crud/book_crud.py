import logging
from typing import Optional, TypeVar, Generic, AsyncIterator
from abc import ABC, abstractmethod

from app.models.book_model import Book

from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel import select, delete

from app.core.exception_utils import handle_exceptions
from app.core.exceptions import InternalServerError


logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseRepository(ABC, Generic[T]):
    """Abstract base repository providing a generic CRUD interface keyed by id."""

    def __init__(self, model: type[T]):
        self.model = model

    @abstractmethod
    def find_all(self, db: AsyncSession) -> AsyncIterator[T]:
        """Stream every entity in store order."""
        pass

    @abstractmethod
    async def find_by_id(self, db: AsyncSession, *, obj_id: int) -> Optional[T]:
        """Get entity by its primary key, or None."""
        pass

    @abstractmethod
    async def save(self, db: AsyncSession, *, obj_in: T) -> T:
        """Insert a new entity or overwrite the one sharing its id."""
        pass

    @abstractmethod
    async def delete(self, db: AsyncSession, *, obj_in: T) -> None:
        """Delete the row matching the entity's id."""
        pass


class BookRepository(BaseRepository[Book]):
    """Repository for all database operations related to the Book model."""

    def __init__(self):
        super().__init__(Book)
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @handle_exceptions(
        default_exception=InternalServerError,
        message="An unexpected database error occurred.",
    )
    async def find_all(self, db: AsyncSession) -> AsyncIterator[Book]:
        """Streams all books straight from the database cursor."""
        result = await db.stream_scalars(select(self.model))
        async for book in result:
            yield book

    @handle_exceptions(
        default_exception=InternalServerError,
        message="An unexpected database error occurred.",
    )
    async def find_by_id(self, db: AsyncSession, *, obj_id: int) -> Optional[Book]:
        """Retrieves a book by its ID."""
        statement = select(self.model).where(self.model.id == obj_id)
        result = await db.execute(statement)
        return result.scalar_one_or_none()

    @handle_exceptions(
        default_exception=InternalServerError,
        message="An unexpected database error occurred.",
    )
    async def save(self, db: AsyncSession, *, obj_in: Book) -> Book:
        """
        Inserts the book when it has no id. Otherwise merges it, so every
        column of the row with that id is replaced by the book's values.
        """
        if obj_in.id is None:
            db.add(obj_in)
            book = obj_in
        else:
            book = await db.merge(obj_in)

        await db.commit()
        await db.refresh(book)
        self._logger.debug(f"Book saved: {book.id}")
        return book

    @handle_exceptions(
        default_exception=InternalServerError,
        message="An unexpected database error occurred.",
    )
    async def delete(self, db: AsyncSession, *, obj_in: Book) -> None:
        """Permanently delete a book. Missing rows are ignored."""
        statement = delete(self.model).where(self.model.id == obj_in.id)
        await db.execute(statement)
        await db.commit()
        self._logger.info(f"Book hard deleted: {obj_in.id}")


book_repository = BookRepository()
