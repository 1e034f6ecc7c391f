"""Unit tests for the Product aggregate."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from scanreg.domain.exceptions import ValidationError
from scanreg.domain.model.product import Product, find_by_code

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class TestProductRegister:

    def test_fields_are_trimmed(self):
        p = Product.register("  A1 ", "  Widget ", "9.99", created_at=NOW)
        assert p.code.value == "A1"
        assert p.name == "Widget"
        assert p.price.amount == Decimal("9.99")
        assert p.created_at == NOW

    def test_generates_distinct_ids(self):
        ids = {Product.register("A1", "Widget", 1, created_at=NOW).id for _ in range(50)}
        assert len(ids) == 50

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            Product.register("A1", "   ", 5, created_at=NOW)

    def test_blank_code_rejected(self):
        with pytest.raises(ValidationError, match="code is required"):
            Product.register("", "Widget", 5, created_at=NOW)

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Product.register("A1", "Widget", -1, created_at=NOW)

    def test_is_immutable(self):
        p = Product.register("A1", "Widget", 5, created_at=NOW)
        with pytest.raises(AttributeError):
            p.name = "Other"  # type: ignore[misc]


class TestFindByCode:

    def _products(self):
        return [
            Product.register("A1", "Widget", 1, created_at=NOW),
            Product.register("B2", "Gadget", 2, created_at=NOW),
        ]

    def test_finds_trimmed_match(self):
        found = find_by_code(self._products(), " B2 ")
        assert found is not None
        assert found.name == "Gadget"

    def test_returns_none_when_absent(self):
        assert find_by_code(self._products(), "C3") is None

    def test_case_sensitive(self):
        assert find_by_code(self._products(), "a1") is None
