# app/models/book_model.py
"""
Book model definition.

Column names are snake_case; the camelCase wire names live on the
schemas in ``app.schemas.book_schema``.
"""

from typing import Optional

from sqlmodel import SQLModel, Field


class Book(SQLModel, table=True):
    __tablename__ = "books"

    id: Optional[int] = Field(
        default=None, primary_key=True, description="A unique identifier for Book"
    )
    author: Optional[str] = Field(default=None, description="The author of the book")
    description: Optional[str] = Field(
        default=None, description="A free-form description of the book"
    )
    cover_image: Optional[str] = Field(
        default=None, description="URL or identifier of the cover image"
    )
    title: Optional[str] = Field(default=None, description="The title of the book")
    publication_year: Optional[int] = Field(
        default=None, description="The year the book was published"
    )

    def __repr__(self) -> str:
        return f"<Book(id={self.id}, title='{self.title}', author='{self.author}')>"
