# app/schemas/book_schema.py
"""
Book schemas for request/response models.

Fields are snake_case in Python and camelCase on the wire
(``coverImage``, ``publicationYear``). Inbound payloads accept either.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BookBase(BaseModel):
    """Base schema for book data."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    author: Optional[str] = Field(
        default=None,
        description="The author of the book",
        examples=["F. Scott Fitzgerald"],
    )
    description: Optional[str] = Field(
        default=None,
        description="A free-form description of the book",
        examples=["A novel about the American dream."],
    )
    cover_image: Optional[str] = Field(
        default=None,
        description="URL or identifier of the cover image",
        examples=["https://example.com/gatsby.jpg"],
    )
    title: Optional[str] = Field(
        default=None,
        description="The title of the book",
        examples=["The Great Gatsby"],
    )
    publication_year: Optional[int] = Field(
        default=None,
        description="The year the book was published",
        examples=[1925],
    )


class BookCreate(BookBase):
    """
    Schema for saving a book.

    Without an ``id`` a new row is inserted. With an ``id`` the row holding
    that id is overwritten wholesale.
    """

    id: Optional[int] = Field(default=None, description="Id of the book to overwrite")


class BookResponse(BookBase):
    """Schema for book responses."""

    id: int

    def to_json(self) -> str:
        """Serialize with camelCase field names."""
        return self.model_dump_json(by_alias=True)
