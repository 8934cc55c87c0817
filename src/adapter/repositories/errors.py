import logging
from contextlib import contextmanager

from sqlalchemy.exc import DBAPIError, IntegrityError

from src.domain.exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(operation: str):
    """
    Re-raise driver failures as StoreUnavailableError.

    IntegrityError passes through untouched; repositories map it to the
    matching domain error.
    """
    try:
        yield
    except IntegrityError:
        raise
    except DBAPIError as exc:
        logger.error(f"Store unavailable during {operation}: {exc.__class__.__name__}")
        raise StoreUnavailableError(f"Store unavailable during {operation}") from exc
