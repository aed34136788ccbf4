"""Unit tests for the presentation adapter."""

from datetime import datetime

import pytest

from asset_inventory.core.exceptions import ValidationError
from asset_inventory.core.presentation import (
    format_date,
    format_price,
    format_status,
    from_view_model,
    reconcile_fields,
    sort_for_display,
    status_class,
    to_form_values,
    to_view_model,
)
from asset_inventory.schemas.asset import AssetResponse
from asset_inventory.schemas.inventory import AssetFormSubmission


@pytest.fixture
def stored_asset() -> AssetResponse:
    return AssetResponse(
        id=3,
        name="Dell Latitude 5520",
        description="Finance",
        category="Laptop",
        status="in_use",
        purchase_date=datetime(2024, 3, 5),
        purchase_price=1234.5,
        created_at=datetime(2024, 3, 6, 9, 30),
        updated_at=datetime(2024, 4, 1, 8, 0),
    )


class TestFormatting:
    @pytest.mark.parametrize(
        "value, expected",
        [(1234.5, "1,234.50"), (0, "0.00"), ("99", "99.00"), (1000000, "1,000,000.00"), (None, "-"), ("", "-")],
    )
    def test__format_price(self, value, expected):
        assert format_price(value) == expected

    def test__format_price__unparseable__placeholder(self):
        assert format_price("n/a") == "-"

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("2024-03-05T00:00:00.000Z", "3/5/2024"),
            ("2023-12-25", "12/25/2023"),
            (datetime(2022, 1, 9, 15, 0), "1/9/2022"),
            (None, "-"),
            ("", "-"),
            ("yesterday", "-"),
        ],
    )
    def test__format_date(self, value, expected):
        assert format_date(value) == expected

    @pytest.mark.parametrize(
        "status, label, css",
        [
            ("available", "Available", "status-available"),
            ("assigned", "Assigned", "status-inuse"),
            ("in_use", "In Use", "status-inuse"),
            ("maintenance", "Maintenance", "status-maintenance"),
            ("retired", "retired", "status-default"),
        ],
    )
    def test__status_label_and_class(self, status, label, css):
        assert format_status(status) == label
        assert status_class(status) == css


class TestReconcileFields:
    def test__snake_case_only__moved_to_camel_case(self):
        record = reconcile_fields({"id": 1, "purchase_price": 10, "created_at": "2024-01-01"})

        assert record["purchasePrice"] == 10
        assert record["createdAt"] == "2024-01-01"
        assert "purchase_price" not in record
        assert record["purchaseDate"] is None

    def test__both_present__camel_case_wins(self):
        record = reconcile_fields({"purchasePrice": 20, "purchase_price": 10})

        assert record["purchasePrice"] == 20

    def test__camel_case_null__falls_back_to_snake_case(self):
        record = reconcile_fields({"updatedAt": None, "updated_at": "2024-02-02"})

        assert record["updatedAt"] == "2024-02-02"


class TestToViewModel:
    def test__from_stored_asset(self, stored_asset: AssetResponse):
        view = to_view_model(stored_asset)

        assert view.id == 3
        assert view.department == "Finance"
        assert view.status_label == "In Use"
        assert view.status_class == "status-inuse"
        assert view.purchase_price == "1,234.50"
        assert view.purchase_date == "3/5/2024"
        assert view.created_at == "2024-03-06T09:30:00.000Z"
        assert view.updated_at == "2024-04-01T08:00:00.000Z"

    def test__from_raw_snake_case_record(self):
        view = to_view_model(
            {
                "id": 7,
                "name": "Projector",
                "description": None,
                "category": "AV",
                "status": "maintenance",
                "purchase_date": None,
                "purchase_price": None,
                "created_at": "2024-01-01T00:00:00Z",
            }
        )

        assert view.department == "-"
        assert view.purchase_price == "-"
        assert view.purchase_date == "-"
        assert view.status_label == "Maintenance"
        assert view.updated_at is None

    def test__serialises_with_camel_case_keys(self, stored_asset: AssetResponse):
        data = to_view_model(stored_asset).model_dump(by_alias=True)

        assert {"statusLabel", "statusClass", "purchaseDate", "purchasePrice", "createdAt", "updatedAt"} <= set(data)


class TestSortForDisplay:
    def test__most_recently_updated_first(self):
        older = to_view_model({"id": 1, "name": "a", "category": "c", "status": "available", "updatedAt": "2024-01-01"})
        newer = to_view_model({"id": 2, "name": "b", "category": "c", "status": "available", "updatedAt": "2024-06-01"})
        created_only = to_view_model(
            {"id": 3, "name": "c", "category": "c", "status": "available", "createdAt": "2024-03-01"}
        )

        ordered = sort_for_display([older, newer, created_only])

        assert [view.id for view in ordered] == [2, 3, 1]


class TestToFormValues:
    def test__prefills_from_stored_asset(self, stored_asset: AssetResponse):
        values = to_form_values(stored_asset)

        assert values.name == "Dell Latitude 5520"
        assert values.department == "Finance"
        assert values.status == "in_use"
        assert values.purchase_date == "2024-03-05"
        assert values.purchase_price == "1234.5"

    def test__whole_price_and_missing_fields(self):
        values = to_form_values({"id": 1, "name": "Desk", "category": "Furniture", "purchasePrice": 300.0})

        assert values.purchase_price == "300"
        assert values.purchase_date == ""
        assert values.department == ""
        assert values.status == "available"


class TestFromViewModel:
    def test__normalizes_form_submission(self):
        payload = from_view_model(
            AssetFormSubmission(
                name="  Dell Latitude 5520 ",
                department="  ",
                category=" Laptop",
                status="assigned",
                purchase_date="2024-03-05",
                purchase_price="1299.99",
            )
        )

        assert payload == {
            "name": "Dell Latitude 5520",
            "description": None,
            "category": "Laptop",
            "status": "assigned",
            "purchase_date": "2024-03-05T00:00:00.000Z",
            "purchase_price": 1299.99,
        }

    def test__accepts_camel_case_mapping(self):
        payload = from_view_model(
            {"name": "Phone", "category": "Mobile", "purchaseDate": "2024-07-01", "purchase_date": "2020-01-01"}
        )

        assert payload["purchase_date"] == "2024-07-01T00:00:00.000Z"
        assert payload["purchase_price"] is None
        assert payload["status"] == "available"

    def test__description_used_when_no_department(self):
        payload = from_view_model({"name": "Phone", "category": "Mobile", "description": " Sales "})

        assert payload["description"] == "Sales"

    def test__non_numeric_price__raises(self):
        with pytest.raises(ValidationError, match="Purchase price must be a valid number"):
            from_view_model({"name": "Phone", "category": "Mobile", "purchase_price": "12abc"})

    @pytest.mark.parametrize("form", [{"name": "", "category": "Mobile"}, {"name": "Phone", "category": "  "}, {}])
    def test__missing_name_or_category__raises(self, form):
        with pytest.raises(ValidationError):
            from_view_model(form)
