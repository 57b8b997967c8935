"""Application service: Update Product Price use case."""

from __future__ import annotations

from decimal import Decimal
from uuid import UUID

from warehouse.domain.model.product import ProductRecord, to_price, to_product_id
from warehouse.domain.model.warehouse import Warehouse


class UpdateProductPriceHandler:

    def __init__(self, warehouse: Warehouse) -> None:
        self._warehouse = warehouse

    def handle(self, product_id: str | UUID, new_price: str | Decimal) -> ProductRecord:
        """Update a product's price.

        The product moves to the end of the warehouse listing and a
        snapshot is added to the change log.
        """
        return self._warehouse.update_product_price(
            to_product_id(product_id), to_price(new_price)
        )
