"""Shared error translation for CRUD operations."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.ext.asyncio import AsyncSession

from minipress.exceptions import ConflictError, ServiceUnavailableError, StorageError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def storage_errors(db: AsyncSession, action: str) -> AsyncIterator[None]:
    """Translate SQLAlchemy failures raised inside the block into StorageError.

    The session is rolled back so the caller can keep using it.
    """
    try:
        yield
    except IntegrityError as e:
        await db.rollback()
        logger.warning(f"Integrity error while trying to {action}: {e.orig}")
        raise ConflictError() from e
    except PoolTimeoutError as e:
        logger.error(f"Connection pool exhausted while trying to {action}")
        raise ServiceUnavailableError() from e
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Database error while trying to {action}: {e}")
        raise StorageError() from e
