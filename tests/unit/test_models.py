"""
Unit tests for the inventory models.
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from inventory_service.models.inventory import InventoryItem, InventoryItemSearch


class TestInventoryItem:
    """Test cases for InventoryItem model."""

    def test_item_from_stored_record(self):
        """Stored attribute names map onto the model fields."""
        item = InventoryItem.model_validate({
            "id": "test-item-id",
            "name": "test-item-name",
            "quantity": Decimal("20"),
            "unitPrice": Decimal("30.5"),
            "createdAt": "05-20-2020",
        })

        assert item.id == "test-item-id"
        assert item.name == "test-item-name"
        assert item.quantity == 20
        assert item.unit_price == Decimal("30.5")
        assert item.created_at == "05-20-2020"

    def test_item_by_field_name(self):
        """Items can be built with the Python field names."""
        item = InventoryItem(name="Widget", quantity=1, unit_price=2)

        assert item.unit_price == Decimal("2")
        assert item.id is None
        assert item.created_at is None

    def test_to_response_uses_stored_names_and_omits_unset(self):
        """The wire format uses the stored names and skips missing attributes."""
        item = InventoryItem(name="Widget", quantity=1, unit_price=2)

        assert item.to_response() == {
            "name": "Widget",
            "quantity": Decimal("1"),
            "unitPrice": Decimal("2"),
        }

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            InventoryItem(name="", quantity=1, unit_price=2)

    def test_non_numeric_quantity_rejected(self):
        with pytest.raises(ValidationError):
            InventoryItem(name="Widget", quantity="lots", unit_price=2)


class TestInventoryItemSearch:
    """Test cases for InventoryItemSearch model."""

    def test_defaults(self):
        search = InventoryItemSearch()

        assert search.id is None
        assert search.name is None

    def test_equality(self):
        assert InventoryItemSearch(name="Widget") == InventoryItemSearch(name="Widget")
        assert InventoryItemSearch(id="a") != InventoryItemSearch(id="b")
