# app/core/exceptions.py
"""
Application exception hierarchy.

Every exception raised on purpose by the application derives from
``BaseAppException`` and knows the HTTP status it maps to. The global
handlers in ``app.core.exception_handler`` turn them into responses.
"""

from typing import Dict, Optional

from fastapi import status


class BaseAppException(Exception):
    """Base class for all application errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "An unexpected error occurred."

    def __init__(
        self,
        detail: Optional[str] = None,
        *,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.detail = detail or self.default_detail
        self.headers = headers
        super().__init__(self.detail)


class ResourceNotFound(BaseAppException):
    """Raised when a lookup by identifier yields no row."""

    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Resource Not Found"

    def __init__(
        self,
        detail: Optional[str] = None,
        *,
        resource_type: str = "Resource",
        headers: Optional[Dict[str, str]] = None,
    ):
        self.resource_type = resource_type
        super().__init__(detail, headers=headers)


class BookNotFound(ResourceNotFound):
    default_detail = "Book Not Found"

    def __init__(self, detail: Optional[str] = None, **kwargs):
        kwargs.setdefault("resource_type", "Book")
        super().__init__(detail, **kwargs)


class InternalServerError(BaseAppException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal Server Error"
