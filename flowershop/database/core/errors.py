# flowershop/database/core/errors.py
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import DataError, DBAPIError, IntegrityError, SQLAlchemyError

from flowershop.common.logging import get_logger
from flowershop.domain.errors import BackendUnavailable, InvalidInput

logger = get_logger(__name__)


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """
    Translate SQLAlchemy failures raised inside the block:

      IntegrityError / DataError -> InvalidInput (the caller sent bad data)
      anything else from the driver -> BackendUnavailable (logged)

    Domain errors raised inside the block pass through untouched.
    """
    try:
        yield
    except (IntegrityError, DataError) as e:
        detail = getattr(getattr(e, "orig", None), "diag", None)
        constraint = getattr(detail, "constraint_name", None)
        msg = f"{operation}: rejected by store"
        if constraint:
            msg = f"{msg} ({constraint})"
        raise InvalidInput(msg) from e
    except DBAPIError as e:
        logger.error("%s failed: backing store error", operation, exc_info=True)
        raise BackendUnavailable() from e
    except SQLAlchemyError as e:
        logger.error("%s failed: %s", operation, type(e).__name__, exc_info=True)
        raise BackendUnavailable() from e
