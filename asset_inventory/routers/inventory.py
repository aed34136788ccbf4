"""Inventory view router: table rows and form submissions for the frontend."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from asset_inventory.core.dependencies import get_asset_store, to_http_exception
from asset_inventory.core.exceptions import AssetError
from asset_inventory.core.presentation import from_view_model, sort_for_display, to_form_values, to_view_model
from asset_inventory.core.store import AssetStore
from asset_inventory.schemas.inventory import (
    AssetFormSubmission,
    AssetFormValues,
    AssetViewModel,
    InventoryResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/inventory", tags=["inventory"])


@router.get("", response_model=InventoryResponse)
async def get_inventory(store: Annotated[AssetStore, Depends(get_asset_store)]) -> InventoryResponse:
    """Inventory table rows, most recently updated first."""
    try:
        assets = store.list_all()
    except AssetError as e:
        raise to_http_exception(e) from e

    items = sort_for_display(to_view_model(asset) for asset in assets)
    return InventoryResponse(items=items, count=len(items))


@router.get("/{asset_id}/form", response_model=AssetFormValues)
async def get_asset_form(
    asset_id: str,
    store: Annotated[AssetStore, Depends(get_asset_store)],
) -> AssetFormValues:
    """Prefill values for the edit form of an asset."""
    try:
        asset = store.get_by_id(asset_id)
    except AssetError as e:
        raise to_http_exception(e) from e

    return to_form_values(asset)


@router.post("", response_model=AssetViewModel, status_code=status.HTTP_201_CREATED)
async def submit_new_asset(
    form: AssetFormSubmission,
    store: Annotated[AssetStore, Depends(get_asset_store)],
) -> AssetViewModel:
    """Create an asset from the add form.

    Raises:
        HTTPException: 400 if the form is incomplete or the price is not a number
    """
    try:
        asset = store.create(from_view_model(form))
    except AssetError as e:
        raise to_http_exception(e) from e

    logger.info(f"Asset {asset.id} created from form")
    return to_view_model(asset)


@router.put("/{asset_id}", response_model=AssetViewModel)
async def submit_asset_edit(
    asset_id: str,
    form: AssetFormSubmission,
    store: Annotated[AssetStore, Depends(get_asset_store)],
) -> AssetViewModel:
    """Update an asset from the edit form.

    Raises:
        HTTPException: 400 for a bad ID or incomplete form, 404 if the asset does not exist
    """
    try:
        asset = store.update(asset_id, from_view_model(form))
    except AssetError as e:
        raise to_http_exception(e) from e

    return to_view_model(asset)
