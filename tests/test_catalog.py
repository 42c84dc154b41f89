"""
Tests for the static catalog
"""

import dataclasses
import pytest
from decimal import Decimal

from core.catalog import PRODUCTS, get_product, list_products


class TestCatalog:
    """Catalog contents and lookups."""

    def test_nine_products_in_order(self):
        names = [p.name for p in list_products()]

        assert names == [
            "Wireless Headphones",
            "Smart Watch",
            "Laptop Stand",
            "Wireless Mouse",
            "USB-C Hub",
            "Portable Charger",
            "Webcam HD",
            "Bluetooth Speaker",
            "Mechanical Keyboard",
        ]

    def test_ids_unique_and_positive(self):
        ids = [p.id for p in PRODUCTS]

        assert len(ids) == len(set(ids))
        assert all(i > 0 for i in ids)

    def test_prices_are_decimal(self):
        assert all(isinstance(p.price, Decimal) and p.price >= 0 for p in PRODUCTS)
        assert get_product(1).price == Decimal("79.99")
        assert get_product(9).price == Decimal("129.99")

    def test_unknown_id(self):
        assert get_product(0) is None
        assert get_product(10) is None

    def test_products_are_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            get_product(1).price = Decimal("1")

    def test_to_dict(self):
        data = get_product(4).to_dict()

        assert data["price"] == 29.99
        assert data["price_display"] == "$29.99"
        assert data["icon"] == "🖱️"
