# tests/mocks/mock_book_repository.py
from typing import AsyncIterator, List, Optional
from app.models.book_model import Book


class FakeBookRepository:
    """
    A fake book repository that uses an in-memory list for testing.
    It mimics the interface of the real BookRepository.
    """

    def __init__(self, initial_books: List[Book] = None):
        self.books = initial_books or []
        self._next_id = max((b.id for b in self.books), default=0) + 1

    async def find_all(self, db) -> AsyncIterator[Book]:
        """Yields every book in insertion order."""
        for book in list(self.books):
            yield book

    async def find_by_id(self, db, *, obj_id: int) -> Optional[Book]:
        """Finds a book by ID in the in-memory list."""
        for book in self.books:
            if book.id == obj_id:
                return book
        return None

    async def save(self, db, *, obj_in: Book) -> Book:
        """Inserts a new book or replaces the one with the same id."""
        if obj_in.id is None:
            obj_in.id = self._next_id
            self._next_id += 1
            self.books.append(obj_in)
            return obj_in

        self.books = [b for b in self.books if b.id != obj_in.id] + [obj_in]
        self._next_id = max(self._next_id, obj_in.id + 1)
        return obj_in

    async def delete(self, db, *, obj_in: Book) -> None:
        """Removes a book from the in-memory list by ID."""
        self.books = [book for book in self.books if book.id != obj_in.id]
