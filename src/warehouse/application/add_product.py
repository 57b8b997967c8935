"""Application service: Add Product use case."""

from __future__ import annotations

from decimal import Decimal
from uuid import UUID

from warehouse.domain.exceptions import ValidationError
from warehouse.domain.model.category import Category
from warehouse.domain.model.product import ProductRecord, to_price, to_product_id
from warehouse.domain.model.warehouse import Warehouse


class AddProductHandler:

    def __init__(self, warehouse: Warehouse) -> None:
        self._warehouse = warehouse

    def handle(
        self,
        name: str,
        category: str | Category | None,
        price: str | Decimal | None = None,
        product_id: str | UUID | None = None,
    ) -> ProductRecord:
        """Add a new product to the warehouse."""
        if category is None:
            raise ValidationError("Category can't be null")

        return self._warehouse.add_product(
            product_id=to_product_id(product_id) if product_id is not None else None,
            name=name,
            category=Category.parse(category),
            price=to_price(price),
        )
