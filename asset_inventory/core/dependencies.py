"""FastAPI dependencies and error translation shared by the routers."""

import logging
from typing import Annotated

from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from asset_inventory.config import settings
from asset_inventory.core.exceptions import (
    AssetError,
    InvalidArgumentError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from asset_inventory.core.store import AssetStore
from asset_inventory.database import get_db

logger = logging.getLogger(__name__)


def get_asset_store(db: Annotated[Session, Depends(get_db)]) -> AssetStore:
    """Build an asset store around the request's database session."""
    return AssetStore(db, strict_status=settings.strict_status)


def to_http_exception(error: AssetError) -> HTTPException:
    """Translate a store or adapter error into the HTTP error the API returns.

    Storage failures keep their short description; the underlying cause has
    already been logged by the store.
    """
    if isinstance(error, (ValidationError, InvalidArgumentError)):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if not isinstance(error, StorageError):
        logger.error(f"Unexpected asset error: {error!r}")
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error) or "Internal server error")
