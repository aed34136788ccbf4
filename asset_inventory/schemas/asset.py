"""Asset schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AssetCreate(BaseModel):
    """Schema for creating a new asset.

    Required fields are checked by the store so that a missing name or
    category is reported as a 400 rather than a schema error.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: Optional[str] = Field(None, description="Name of the asset")
    description: Optional[str] = Field(None, description="Free-text description (shown as department)")
    category: Optional[str] = Field(None, description="Asset category")
    status: Optional[str] = Field(None, description="Lifecycle status, defaults to 'available'")
    purchase_date: Optional[str] = Field(None, description="Purchase date as an ISO 8601 string")
    purchase_price: Optional[float | str] = Field(None, description="Purchase price")


class AssetUpdate(BaseModel):
    """Schema for partially updating an asset.

    Only the fields present in the request body are applied; an explicit
    null or empty string clears the field.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: Optional[str] = Field(None, description="New name for the asset")
    description: Optional[str] = Field(None, description="New description")
    category: Optional[str] = Field(None, description="New category")
    status: Optional[str] = Field(None, description="New status")
    purchase_date: Optional[str] = Field(None, description="New purchase date as an ISO 8601 string")
    purchase_price: Optional[float | str] = Field(None, description="New purchase price")


class AssetResponse(BaseModel):
    """Schema for returning asset information."""

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: int = Field(..., description="Unique identifier of the asset")
    name: str = Field(..., description="Name of the asset")
    description: Optional[str] = Field(None, description="Description of the asset")
    category: str = Field(..., description="Asset category")
    status: str = Field(..., description="Lifecycle status")
    purchase_date: Optional[datetime] = Field(None, description="When the asset was purchased")
    purchase_price: Optional[float] = Field(None, description="Purchase price")
    created_at: datetime = Field(..., description="Timestamp when the asset was created")
    updated_at: datetime = Field(..., description="Timestamp when the asset was last updated")


class AssetDeleteResponse(BaseModel):
    """Schema for the delete endpoint response."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str = Field(..., description="Status message")
    deleted_asset: AssetResponse = Field(..., description="The asset as it was before deletion")
