import json
import logging

import pytest
from starlette.requests import Request

from app.core.exception_handler import app_exception_handler, unhandled_exception_handler
from app.core.exception_utils import handle_exceptions, raise_for_status
from app.core.exceptions import BookNotFound, InternalServerError

pytestmark = pytest.mark.asyncio


def make_request() -> Request:
    return Request({"type": "http", "method": "GET", "path": "/api/v1/books", "headers": []})


async def test_raise_for_status_raises_when_condition_true():
    with pytest.raises(BookNotFound) as exc_info:
        raise_for_status(condition=True, exception=BookNotFound)

    assert exc_info.value.detail == "Book Not Found"


async def test_raise_for_status_noop_when_condition_false():
    raise_for_status(condition=False, exception=BookNotFound)


async def test_handle_exceptions_wraps_unexpected_errors():
    @handle_exceptions(default_exception=InternalServerError, message="db down")
    async def broken():
        raise RuntimeError("boom")

    with pytest.raises(InternalServerError) as exc_info:
        await broken()

    assert exc_info.value.detail == "db down"
    assert isinstance(exc_info.value.__cause__, RuntimeError)


async def test_handle_exceptions_passes_app_exceptions_through():
    @handle_exceptions()
    async def missing():
        raise BookNotFound()

    with pytest.raises(BookNotFound):
        await missing()


async def test_handle_exceptions_wraps_async_generators():
    @handle_exceptions(message="stream failed")
    async def rows():
        yield 1
        raise RuntimeError("cursor lost")

    received = []
    with pytest.raises(InternalServerError):
        async for row in rows():
            received.append(row)

    assert received == [1]


async def test_app_exception_handler_renders_status_and_detail():
    response = await app_exception_handler(make_request(), BookNotFound())

    assert response.status_code == 404
    assert json.loads(response.body) == {"detail": "Book Not Found"}


async def test_unhandled_exception_handler_returns_500():
    response = await unhandled_exception_handler(make_request(), RuntimeError("boom"))

    assert response.status_code == 500
    assert json.loads(response.body) == {"detail": "Internal Server Error"}


async def test_app_exception_handler_logs_resource_type(caplog):
    with caplog.at_level(logging.WARNING, logger="app.core.exception_handler"):
        await app_exception_handler(make_request(), BookNotFound())

    (record,) = [r for r in caplog.records if r.name == "app.core.exception_handler"]
    assert record.resource_type == "Book"
    assert record.status_code == 404
