"""Inventory view schemas: table rows and the add/edit form."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AssetViewModel(BaseModel):
    """Display-ready projection of an asset for the inventory table."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    name: str
    department: str
    category: str
    status: str
    status_label: str
    status_class: str
    purchase_date: str
    purchase_price: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class InventoryResponse(BaseModel):
    """Inventory table contents."""

    items: list[AssetViewModel]
    count: int = Field(..., description="Number of records shown")


class AssetFormValues(BaseModel):
    """Values used to prefill the edit form."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = ""
    department: str = ""
    category: str = ""
    status: str = "available"
    purchase_date: str = Field("", description="Date in YYYY-MM-DD form, or empty")
    purchase_price: str = Field("", description="Price as typed into the form, or empty")


class AssetFormSubmission(BaseModel):
    """Raw add/edit form submission. Both snake_case and camelCase keys are accepted."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: Optional[str] = None
    department: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    status: Optional[str] = None
    purchase_date: Optional[str] = None
    purchase_price: Optional[float | str] = None
