"""Pydantic schemas package."""

from asset_inventory.schemas.asset import (
    AssetCreate,
    AssetDeleteResponse,
    AssetResponse,
    AssetUpdate,
)
from asset_inventory.schemas.inventory import (
    AssetFormSubmission,
    AssetFormValues,
    AssetViewModel,
    InventoryResponse,
)

__all__ = [
    "AssetCreate",
    "AssetUpdate",
    "AssetResponse",
    "AssetDeleteResponse",
    "AssetViewModel",
    "AssetFormValues",
    "AssetFormSubmission",
    "InventoryResponse",
]
