# Import every table model so SQLModel.metadata knows about it before create_all.
from app.models.book_model import Book  # noqa: F401
