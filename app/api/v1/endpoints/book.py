import logging

from typing import AsyncIterator
from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse, StreamingResponse
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.config import settings
from app.core.exceptions import BaseAppException, BookNotFound
from app.db.session import get_session, get_session_factory
from app.utils.deps import get_stream_delay
from app.utils.sse import (
    EVENT_STREAM_MEDIA_TYPE,
    format_event,
    paced_events,
    wants_event_stream,
)

from app.schemas.book_schema import BookCreate, BookResponse
from app.models.book_model import Book
from app.services.book_service import book_service


logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Books"],
    prefix=f"{settings.API_V1_STR}/books",
)


def _serialize_book(book: Book) -> str:
    return BookResponse.model_validate(book).to_json()


def _book_response(request: Request, book: Book, status_code: int) -> Response:
    """Render a single book as JSON, or as one SSE event when asked for."""
    if wants_event_stream(request):
        return Response(
            content=format_event(_serialize_book(book)),
            status_code=status_code,
            media_type=EVENT_STREAM_MEDIA_TYPE,
        )
    return JSONResponse(
        content=BookResponse.model_validate(book).model_dump(mode="json", by_alias=True),
        status_code=status_code,
    )


def _message_response(request: Request, message: str, status_code: int) -> Response:
    """Render a plain message as text, or as one SSE event when asked for."""
    if wants_event_stream(request):
        return Response(
            content=format_event(message),
            status_code=status_code,
            media_type=EVENT_STREAM_MEDIA_TYPE,
        )
    return PlainTextResponse(content=message, status_code=status_code)


async def _book_event_stream(
    session_factory: async_sessionmaker[AsyncSession], delay: float
) -> AsyncIterator[str]:
    # The stream outlives the request handler, so it owns its session.
    async with session_factory() as db:
        try:
            async for event in paced_events(
                book_service.get_all_books(db=db),
                delay=delay,
                serialize=_serialize_book,
            ):
                yield event
        except BaseAppException as exc:
            logger.error(f"Book stream aborted: {exc.detail}")
            raise


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    summary="Stream all books",
    description="Streams every book as a server-sent event, one at a time.",
    response_class=StreamingResponse,
    responses={200: {"content": {EVENT_STREAM_MEDIA_TYPE: {}}}},
)
async def get_all_books(
    *,
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
    delay: float = Depends(get_stream_delay),
):
    """
    Stream all books.

    Each book is pushed as its own `data:` event after a short delay, so a
    client sees the feed arrive progressively. An empty table yields an
    empty stream.
    """
    return StreamingResponse(
        _book_event_stream(session_factory, delay),
        media_type=EVENT_STREAM_MEDIA_TYPE,
    )


@router.get(
    "/{book_id}",
    status_code=status.HTTP_200_OK,
    response_model=BookResponse,
    summary="Get book by id",
    description="Get a single book by its id. Unknown ids answer 404 with no body.",
    responses={status.HTTP_404_NOT_FOUND: {"description": "Book Not Found"}},
)
async def get_book_by_id(
    *, request: Request, db: AsyncSession = Depends(get_session), book_id: int
):
    """Get book by its ID"""
    try:
        book = await book_service.get_book_by_id(db=db, book_id=book_id)
    except BookNotFound:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return _book_response(request, book, status.HTTP_200_OK)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=BookResponse,
    summary="Save a book",
    description="Create a new book, or overwrite an existing one when an id is given.",
)
async def save_book(
    *,
    request: Request,
    db: AsyncSession = Depends(get_session),
    book_data: BookCreate,
):
    """
    Save a book.
    - **id**: optional; when set, the book with that id is replaced wholesale
    - **author**, **title**, **description**, **coverImage**, **publicationYear**:
      free-form values, none of them required
    """
    book = Book(**book_data.model_dump())
    saved_book = await book_service.save_book(db=db, book=book)
    return _book_response(request, saved_book, status.HTTP_201_CREATED)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_200_OK,
    summary="Delete a book",
    description="Delete a book by its id",
    response_class=PlainTextResponse,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Book Not Found"}},
)
async def delete_book_by_id(
    *, request: Request, db: AsyncSession = Depends(get_session), book_id: int
):
    """Delete a book and answer with a confirmation message."""
    try:
        message = await book_service.delete_book_by_id(db=db, book_id=book_id)
    except BookNotFound as exc:
        return _message_response(request, exc.detail, status.HTTP_404_NOT_FOUND)
    return _message_response(request, message, status.HTTP_200_OK)
