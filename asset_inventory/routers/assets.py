"""Asset router."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from asset_inventory.core.dependencies import get_asset_store, to_http_exception
from asset_inventory.core.exceptions import AssetError
from asset_inventory.core.store import AssetStore
from asset_inventory.schemas.asset import AssetCreate, AssetDeleteResponse, AssetResponse, AssetUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/assets", tags=["assets"])


@router.get("", response_model=list[AssetResponse])
async def list_assets(store: Annotated[AssetStore, Depends(get_asset_store)]) -> list[AssetResponse]:
    """List all assets ordered by ID.

    Args:
        store: Asset store bound to the request session

    Returns:
        list[AssetResponse]: Every stored asset
    """
    try:
        return store.list_all()
    except AssetError as e:
        raise to_http_exception(e) from e


@router.get("/{asset_id}", response_model=AssetResponse)
async def get_asset(
    asset_id: str,
    store: Annotated[AssetStore, Depends(get_asset_store)],
) -> AssetResponse:
    """Get a specific asset by ID.

    Args:
        asset_id: Numeric asset ID
        store: Asset store bound to the request session

    Returns:
        AssetResponse: The requested asset

    Raises:
        HTTPException: 400 for a non-numeric ID, 404 if the asset does not exist
    """
    try:
        return store.get_by_id(asset_id)
    except AssetError as e:
        raise to_http_exception(e) from e


@router.post("", response_model=AssetResponse, status_code=status.HTTP_201_CREATED)
async def create_asset(
    asset_data: AssetCreate,
    store: Annotated[AssetStore, Depends(get_asset_store)],
) -> AssetResponse:
    """Create a new asset.

    Args:
        asset_data: Asset fields; name and category are required
        store: Asset store bound to the request session

    Returns:
        AssetResponse: The newly created asset

    Raises:
        HTTPException: 400 if name or category is missing or a field is malformed
    """
    try:
        return store.create(asset_data.model_dump(exclude_unset=True))
    except AssetError as e:
        raise to_http_exception(e) from e


@router.put("/{asset_id}", response_model=AssetResponse)
async def update_asset(
    asset_id: str,
    asset_data: AssetUpdate,
    store: Annotated[AssetStore, Depends(get_asset_store)],
) -> AssetResponse:
    """Update an asset. Only the fields present in the body are changed.

    Args:
        asset_id: Numeric asset ID
        asset_data: Fields to change
        store: Asset store bound to the request session

    Returns:
        AssetResponse: The updated asset

    Raises:
        HTTPException: 400 for a non-numeric ID or malformed field, 404 if the asset does not exist
    """
    try:
        return store.update(asset_id, asset_data.model_dump(exclude_unset=True))
    except AssetError as e:
        raise to_http_exception(e) from e


@router.delete("/{asset_id}", response_model=AssetDeleteResponse)
async def delete_asset(
    asset_id: str,
    store: Annotated[AssetStore, Depends(get_asset_store)],
) -> AssetDeleteResponse:
    """Delete an asset.

    Args:
        asset_id: Numeric asset ID
        store: Asset store bound to the request session

    Returns:
        AssetDeleteResponse: Confirmation message and the deleted asset

    Raises:
        HTTPException: 400 for a non-numeric ID, 404 if the asset does not exist
    """
    try:
        deleted = store.delete(asset_id)
    except AssetError as e:
        raise to_http_exception(e) from e

    return AssetDeleteResponse(message="Asset deleted successfully", deleted_asset=deleted)
