# app/core/exception_utils.py
import functools
import inspect
import logging
from typing import Any, Callable, Type

from app.core.exceptions import BaseAppException, InternalServerError

logger = logging.getLogger(__name__)


def raise_for_status(
    *, condition: Any, exception: Type[BaseAppException], **kwargs: Any
) -> None:
    """Raise ``exception(**kwargs)`` when ``condition`` is truthy."""
    if condition:
        raise exception(**kwargs)


def handle_exceptions(
    default_exception: Type[BaseAppException] = InternalServerError,
    message: str = "An unexpected error occurred.",
) -> Callable:
    """
    Decorator that converts unexpected errors into application exceptions.

    Application exceptions pass through untouched. Anything else is logged
    with its traceback and re-raised as ``default_exception(detail=message)``.
    Works for both coroutine functions and async generator functions.
    """

    def decorator(func: Callable) -> Callable:
        if inspect.isasyncgenfunction(func):

            @functools.wraps(func)
            async def gen_wrapper(*args, **kwargs):
                try:
                    async for item in func(*args, **kwargs):
                        yield item
                except BaseAppException:
                    raise
                except Exception as exc:
                    logger.error(
                        f"Unhandled error in {func.__qualname__}: {exc}",
                        exc_info=True,
                    )
                    raise default_exception(detail=message) from exc

            return gen_wrapper

        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except BaseAppException:
                raise
            except Exception as exc:
                logger.error(
                    f"Unhandled error in {func.__qualname__}: {exc}", exc_info=True
                )
                raise default_exception(detail=message) from exc

        return wrapper

    return decorator
