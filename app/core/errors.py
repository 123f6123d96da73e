"""
Error types raised by the event operations.

Every operation funnels what it catches through ``handle_error`` so callers
only ever see an ``EventsError`` subclass and can branch on its kind.
"""

import logging
from typing import NoReturn

from pymongo.errors import DuplicateKeyError

logger = logging.getLogger(__name__)


class EventsError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(EventsError):
    status_code = 404


class ConflictError(EventsError):
    status_code = 409


class InvalidArgumentError(EventsError):
    status_code = 400


class InternalError(EventsError):
    status_code = 500


def handle_error(error: Exception) -> NoReturn:
    """Log ``error`` and re-raise it as an ``EventsError``."""
    if isinstance(error, NotFoundError):
        logger.info(error.message)
        raise error
    if isinstance(error, EventsError):
        logger.warning(error.message)
        raise error
    if isinstance(error, DuplicateKeyError):
        logger.warning(f"Duplicate key: {error}")
        raise ConflictError("Event already exists") from error

    logger.error(f"Unexpected error: {error!r}", exc_info=error)
    raise InternalError(str(error) or error.__class__.__name__) from error
