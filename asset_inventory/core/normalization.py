"""Trimming and type coercion applied to raw asset input before it is stored."""

import math
from datetime import date, datetime, time, timezone
from decimal import Decimal
from typing import Any

from asset_inventory.core.exceptions import ValidationError


def clean_text(value: Any) -> str | None:
    """Convert a value to a stripped string, keeping None as None."""
    if value is None:
        return None
    return str(value).strip()


def optional_text(value: Any) -> str | None:
    """Strip a value and map blank strings to None."""
    cleaned = clean_text(value)
    return cleaned or None


def parse_price(value: Any) -> float | None:
    """Parse a purchase price.

    Args:
        value: Number, numeric string, empty string or None

    Returns:
        float | None: The price, or None when absent or blank

    Raises:
        ValidationError: If the value is not a finite number
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValidationError("Purchase price must be a valid number")
    if isinstance(value, str):
        value = value.strip()
        if value == "":
            return None
    if not isinstance(value, (int, float, Decimal, str)):
        raise ValidationError("Purchase price must be a valid number")

    try:
        price = float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError("Purchase price must be a valid number") from e

    if not math.isfinite(price):
        raise ValidationError("Purchase price must be a valid number")
    return price


def parse_date(value: Any) -> datetime | None:
    """Parse a purchase date into an aware datetime.

    Dates without a time become midnight UTC, and naive datetimes are taken
    to be UTC.

    Raises:
        ValidationError: If the value is not a recognisable date
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str):
        text = value.strip()
        if text == "":
            return None
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as e:
            raise ValidationError("Purchase date must be a valid date") from e
    else:
        raise ValidationError("Purchase date must be a valid date")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def to_iso_timestamp(value: datetime) -> str:
    """Render a datetime as an ISO 8601 UTC timestamp with millisecond precision."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")
