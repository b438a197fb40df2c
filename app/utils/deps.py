# # app/utils/deps.py
"""
FastAPI dependencies shared by the endpoints.

Database session dependencies live in ``app.db.session``; this module holds
the request-independent knobs that tests override.
"""

from app.core.config import settings


def get_stream_delay() -> float:
    """Seconds to wait before pushing each element of a streamed listing."""
    return settings.BOOK_STREAM_DELAY_SECONDS
