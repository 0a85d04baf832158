"""Translation of SQLAlchemy failures into domain StorageError."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError

from cargo_backoffice.domain.exceptions import StorageError

logger = logging.getLogger(__name__)


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Re-raise any SQLAlchemy error inside the block as StorageError(operation)."""
    try:
        yield
    except SQLAlchemyError as exc:
        message = str(exc.orig if getattr(exc, "orig", None) else exc)
        logger.error("Storage failure in %s: %s", operation, message)
        raise StorageError(operation, message) from exc
