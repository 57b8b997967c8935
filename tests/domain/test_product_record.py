"""Unit tests for the ProductRecord value object and Category."""

import uuid
from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from warehouse.domain.exceptions import ValidationError
from warehouse.domain.model.category import Category
from warehouse.domain.model.product import ProductRecord, to_price, to_product_id


# ── ProductRecord ────────────────────────────────────────────────────────────


class TestProductRecord:

    def test_creation_defaults(self):
        p = ProductRecord(name="Widget", category=Category.TOOLS)
        assert isinstance(p.id, uuid.UUID)
        assert p.price == Decimal("0")

    def test_generated_ids_differ(self):
        a = ProductRecord(name="Widget", category=Category.TOOLS)
        b = ProductRecord(name="Widget", category=Category.TOOLS)
        assert a.id != b.id
        assert a != b

    def test_equality_by_id_only(self):
        pid = uuid.uuid4()
        a = ProductRecord(name="Widget", category=Category.TOOLS, price=Decimal("1"), id=pid)
        b = ProductRecord(name="Gadget", category=Category.TOYS, price=Decimal("2"), id=pid)
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_immutable(self):
        p = ProductRecord(name="Widget", category=Category.TOOLS)
        with pytest.raises(FrozenInstanceError):
            p.price = Decimal("5")  # type: ignore[misc]

    def test_with_price_keeps_identity(self):
        p = ProductRecord(name="Widget", category=Category.TOOLS, price=Decimal("9.99"))
        updated = p.with_price(Decimal("14.99"))
        assert updated is not p
        assert updated == p
        assert updated.price == Decimal("14.99")
        assert updated.name == "Widget"
        assert updated.category is Category.TOOLS
        assert p.price == Decimal("9.99")

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_empty_name_rejected(self, name):
        with pytest.raises(ValidationError, match="name can't be null or empty"):
            ProductRecord(name=name, category=Category.TOOLS)

    def test_missing_category_rejected(self):
        with pytest.raises(ValidationError, match="category can't be null"):
            ProductRecord(name="Widget", category=None)  # type: ignore[arg-type]

    def test_non_decimal_price_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            ProductRecord(name="Widget", category=Category.TOOLS, price=9.99)  # type: ignore[arg-type]

    def test_create_generates_id_and_zero_price(self):
        p = ProductRecord.create(None, "Widget", Category.TOOLS, None)
        assert isinstance(p.id, uuid.UUID)
        assert p.price == Decimal("0")

    def test_create_keeps_supplied_id(self):
        pid = uuid.uuid4()
        p = ProductRecord.create(pid, "Widget", Category.TOOLS, "9.99")
        assert p.id == pid
        assert p.price == Decimal("9.99")

    def test_create_without_category_rejected(self):
        with pytest.raises(ValidationError, match="category can't be null"):
            ProductRecord.create(None, "Widget", None)


# ── Parsing helpers ──────────────────────────────────────────────────────────


class TestToPrice:

    def test_from_string(self):
        assert to_price("19.99") == Decimal("19.99")

    def test_from_int(self):
        assert to_price(10) == Decimal("10")

    def test_from_float_uses_repr(self):
        assert to_price(9.99) == Decimal("9.99")

    def test_none_is_zero(self):
        assert to_price(None) == Decimal("0")

    def test_arbitrary_precision_kept(self):
        assert to_price("0.123456789012345678901234567890") == Decimal(
            "0.123456789012345678901234567890"
        )

    @pytest.mark.parametrize("raw", ["abc", "", "NaN", "Infinity"])
    def test_invalid_rejected(self, raw):
        with pytest.raises(ValidationError, match="Invalid price"):
            to_price(raw)

    @pytest.mark.parametrize("raw", [Decimal("NaN"), Decimal("sNaN"), Decimal("-Infinity")])
    def test_non_finite_decimal_rejected(self, raw):
        with pytest.raises(ValidationError, match="Invalid price"):
            to_price(raw)

    def test_finite_decimal_passes_through(self):
        price = Decimal("9.99")
        assert to_price(price) is price


class TestToProductId:

    def test_parses_text(self):
        pid = uuid.uuid4()
        assert to_product_id(str(pid)) == pid

    def test_passes_uuid_through(self):
        pid = uuid.uuid4()
        assert to_product_id(pid) is pid

    def test_invalid_rejected(self):
        with pytest.raises(ValidationError, match="Invalid product id"):
            to_product_id("not-a-uuid")


# ── Category ─────────────────────────────────────────────────────────────────


class TestCategory:

    def test_parse_ignores_case(self):
        assert Category.parse("tools") is Category.TOOLS
        assert Category.parse(" Electronics ") is Category.ELECTRONICS

    def test_parse_passes_member_through(self):
        assert Category.parse(Category.DAIRY) is Category.DAIRY

    def test_parse_unknown_rejected(self):
        with pytest.raises(ValidationError, match="Unknown category"):
            Category.parse("spaceships")

    def test_str(self):
        assert str(Category.GROCERY) == "GROCERY"
