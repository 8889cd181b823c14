import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError

from postwall.core.errors import StoreError

logger = logging.getLogger("store")


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """Re-raise database failures as StoreError so callers see 500, not a silent default."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.error("store_operation_failed", extra={"error": f"{operation}: {e}"})
        raise StoreError(f"Storage unavailable ({operation})") from e
