"""Presentation adapter between stored assets and the inventory frontend.

Stored records are shaped into view models for the inventory table, and form
submissions are normalized into write payloads for the store. Upstream
records may use snake_case or camelCase keys for the date and price fields;
camelCase wins when both are present.
"""

from datetime import datetime
from typing import Any, Iterable, Mapping

from pydantic import BaseModel

from asset_inventory.core.exceptions import ValidationError
from asset_inventory.core.normalization import (
    clean_text,
    optional_text,
    parse_date,
    parse_price,
    to_iso_timestamp,
)
from asset_inventory.models.asset import DEFAULT_STATUS
from asset_inventory.schemas.inventory import AssetFormValues, AssetViewModel

PLACEHOLDER = "-"

STATUS_LABELS = {
    "available": "Available",
    "in_use": "In Use",
    "assigned": "Assigned",
    "maintenance": "Maintenance",
}

STATUS_CLASSES = {
    "available": "status-available",
    "in_use": "status-inuse",
    "assigned": "status-inuse",
    "maintenance": "status-maintenance",
}

# (snake_case, camelCase)
FIELD_VARIANTS = (
    ("purchase_date", "purchaseDate"),
    ("purchase_price", "purchasePrice"),
    ("created_at", "createdAt"),
    ("updated_at", "updatedAt"),
)


def reconcile_fields(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Collapse snake_case/camelCase variants into the camelCase key."""
    record = dict(raw)
    for snake, camel in FIELD_VARIANTS:
        camel_value = record.pop(camel, None)
        snake_value = record.pop(snake, None)
        record[camel] = camel_value if camel_value is not None else snake_value
    return record


def format_price(value: Any) -> str:
    """Format a price with thousands separators and two decimals."""
    if value is None or value == "":
        return PLACEHOLDER
    try:
        return f"{float(value):,.2f}"
    except (TypeError, ValueError):
        return PLACEHOLDER


def format_date(value: Any) -> str:
    """Format a date as M/D/YYYY, or the placeholder when absent or invalid."""
    try:
        parsed = parse_date(value)
    except ValidationError:
        return PLACEHOLDER
    if parsed is None:
        return PLACEHOLDER
    return f"{parsed.month}/{parsed.day}/{parsed.year}"


def format_status(status: str) -> str:
    return STATUS_LABELS.get(status, status)


def status_class(status: str) -> str:
    return STATUS_CLASSES.get(status, "status-default")


def _as_record(asset: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(asset, BaseModel):
        asset = asset.model_dump(by_alias=True)
    return reconcile_fields(asset)


def _timestamp(value: Any) -> str | None:
    try:
        parsed = parse_date(value)
    except ValidationError:
        return None
    return to_iso_timestamp(parsed) if parsed else None


def to_view_model(asset: BaseModel | Mapping[str, Any]) -> AssetViewModel:
    """Shape a stored asset into a row for the inventory table.

    Args:
        asset: AssetResponse or a raw record with either key convention

    Returns:
        AssetViewModel: Display-ready row
    """
    record = _as_record(asset)
    status = record.get("status") or DEFAULT_STATUS

    return AssetViewModel(
        id=record["id"],
        name=record.get("name") or PLACEHOLDER,
        department=record.get("description") or PLACEHOLDER,
        category=record.get("category") or PLACEHOLDER,
        status=status,
        status_label=format_status(status),
        status_class=status_class(status),
        purchase_date=format_date(record.get("purchaseDate")),
        purchase_price=format_price(record.get("purchasePrice")),
        created_at=_timestamp(record.get("createdAt")),
        updated_at=_timestamp(record.get("updatedAt")),
    )


def _comparable_time(view: AssetViewModel) -> float:
    stamp = view.updated_at or view.created_at
    if stamp:
        return datetime.fromisoformat(stamp.replace("Z", "+00:00")).timestamp()
    return float(view.id)


def sort_for_display(views: Iterable[AssetViewModel]) -> list[AssetViewModel]:
    """Order rows most recently touched first; rows without timestamps fall back to their ID."""
    return sorted(views, key=_comparable_time, reverse=True)


def _price_input(value: Any) -> str:
    if value is None:
        return ""
    price = float(value)
    return str(int(price)) if price.is_integer() else str(price)


def _date_input(value: Any) -> str:
    try:
        parsed = parse_date(value)
    except ValidationError:
        return ""
    return parsed.date().isoformat() if parsed else ""


def to_form_values(asset: BaseModel | Mapping[str, Any]) -> AssetFormValues:
    """Prefill values for editing an existing asset."""
    record = _as_record(asset)
    return AssetFormValues(
        name=record.get("name") or "",
        department=record.get("description") or "",
        category=record.get("category") or "",
        status=record.get("status") or DEFAULT_STATUS,
        purchase_date=_date_input(record.get("purchaseDate")),
        purchase_price=_price_input(record.get("purchasePrice")),
    )


def from_view_model(form: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
    """Normalize a form submission into a write payload for the store.

    The department field of the form is stored as the asset description.

    Args:
        form: AssetFormSubmission or a raw mapping with either key convention

    Returns:
        dict: name, description, category, status, purchase_date (ISO
        timestamp or None) and purchase_price (float or None)

    Raises:
        ValidationError: If name or category is blank, the price is not a
            number, or the date cannot be parsed
    """
    if isinstance(form, BaseModel):
        form = form.model_dump(by_alias=True, exclude_none=True)
    record = reconcile_fields(form)

    name = clean_text(record.get("name")) or ""
    category = clean_text(record.get("category")) or ""
    if not name or not category:
        raise ValidationError("Please provide at least a name and category before saving.")

    department = record.get("department")
    if department is None:
        department = record.get("description")

    purchase_date = parse_date(record.get("purchaseDate"))

    return {
        "name": name,
        "description": optional_text(department),
        "category": category,
        "status": clean_text(record.get("status")) or DEFAULT_STATUS,
        "purchase_date": to_iso_timestamp(purchase_date) if purchase_date else None,
        "purchase_price": parse_price(record.get("purchasePrice")),
    }
