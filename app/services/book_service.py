import logging
from typing import AsyncIterator

from sqlmodel.ext.asyncio.session import AsyncSession

from app.crud.book_crud import book_repository
from app.models.book_model import Book
from app.core.exception_utils import raise_for_status
from app.core.exceptions import BookNotFound

logger = logging.getLogger(__name__)

BOOK_DELETED_MESSAGE = "Book Deleted Successfully!"


class BookService:
    """
    Book service sitting between the HTTP layer and the repository.

    Its only policy is turning a missing row into ``BookNotFound`` and
    shaping the delete confirmation.
    """

    def __init__(self):
        # Kept as an attribute so tests can swap in a fake repository.
        self.book_repository = book_repository
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    # ======= READ OPERATIONS =======
    def get_all_books(self, db: AsyncSession) -> AsyncIterator[Book]:
        """Stream every book in store order."""
        return self.book_repository.find_all(db=db)

    async def get_book_by_id(self, db: AsyncSession, *, book_id: int) -> Book:
        """Get a book by its ID or raise BookNotFound."""
        book = await self.book_repository.find_by_id(db=db, obj_id=book_id)
        raise_for_status(condition=book is None, exception=BookNotFound)
        return book

    # ======= WRITE OPERATIONS =======
    async def save_book(self, db: AsyncSession, *, book: Book) -> Book:
        """Insert or overwrite a book."""
        saved_book = await self.book_repository.save(db=db, obj_in=book)
        self._logger.info(
            f"Book saved: {saved_book.id}",
            extra={"book_id": saved_book.id, "upsert": book.id is not None},
        )
        return saved_book

    async def delete_book_by_id(self, db: AsyncSession, *, book_id: int) -> str:
        """Hard delete a book by its ID and return a confirmation message."""
        book_to_delete = await self.get_book_by_id(db=db, book_id=book_id)

        await self.book_repository.delete(db=db, obj_in=book_to_delete)

        self._logger.warning(
            f"Book {book_id} permanently deleted",
            extra={
                "deleted_book_id": book_id,
                "deleted_book_title": book_to_delete.title,
            },
        )
        return BOOK_DELETED_MESSAGE


book_service = BookService()
