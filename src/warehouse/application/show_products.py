"""Application service: product queries."""

from __future__ import annotations

from uuid import UUID

from warehouse.application.dto import ProductDTO
from warehouse.domain.model.category import Category
from warehouse.domain.model.product import to_product_id
from warehouse.domain.model.warehouse import Warehouse


class ShowProductsHandler:

    def __init__(self, warehouse: Warehouse) -> None:
        self._warehouse = warehouse

    def all(self) -> list[ProductDTO]:
        return [ProductDTO.from_record(p) for p in self._warehouse.get_products()]

    def by_id(self, product_id: str | UUID) -> ProductDTO | None:
        product = self._warehouse.get_product_by_id(to_product_id(product_id))
        return ProductDTO.from_record(product) if product is not None else None

    def by_category(self, category: str | Category) -> list[ProductDTO]:
        return [
            ProductDTO.from_record(p)
            for p in self._warehouse.get_products_by(Category.parse(category))
        ]

    def grouped(self) -> dict[str, list[ProductDTO]]:
        """Products keyed by category name; empty categories are left out."""
        grouped = self._warehouse.get_products_grouped_by_categories()
        return {
            str(category): [ProductDTO.from_record(p) for p in products]
            for category, products in grouped.items()
        }

    def changed(self) -> list[ProductDTO]:
        return [
            ProductDTO.from_record(p) for p in self._warehouse.get_changed_products()
        ]
