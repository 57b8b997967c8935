"""Warehouse aggregate.

A warehouse owns the products stored under one name, plus the log of
every price change made to them. It is a plain in-memory structure with
no locking; callers own it from a single thread.
"""

from __future__ import annotations

import logging
import uuid
from decimal import Decimal

from warehouse.domain.exceptions import ProductNotFoundError, ValidationError
from warehouse.domain.model.category import Category
from warehouse.domain.model.product import ProductRecord, to_price

logger = logging.getLogger(__name__)


class Warehouse:
    """Aggregate root for a named product collection.

    Invariants:
    - at most one record per id in ``products``
    - ``changed_products`` only grows (until ``clear_products``) and may
      hold several snapshots of the same product
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._products: list[ProductRecord] = []
        self._changed_products: list[ProductRecord] = []

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Warehouse(name={self._name!r}, products={len(self._products)})"

    def is_empty(self) -> bool:
        return not self._products

    def add_product(
        self,
        product_id: uuid.UUID | None,
        name: str,
        category: Category | None,
        price: str | float | int | Decimal | None = None,
    ) -> ProductRecord:
        """Add a new product.

        Uniqueness is by id only; use ``update_product_price`` to change
        an existing product.
        """
        product = ProductRecord.create(product_id, name, category, price)
        if product in self._products:
            raise ValidationError(
                f"Product with id {product.id} already exists, "
                "use update_product_price for updates"
            )
        self._products.append(product)
        logger.info(
            "Added product %s (%s, %s) to warehouse %r",
            product.id, product.name, product.category, self._name,
        )
        return product

    def get_products(self) -> tuple[ProductRecord, ...]:
        """Return every product, in insertion order."""
        return tuple(self._products)

    def get_product_by_id(self, product_id: uuid.UUID) -> ProductRecord | None:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def update_product_price(
        self, product_id: uuid.UUID, new_price: str | float | int | Decimal
    ) -> ProductRecord:
        """Replace a product with a copy carrying ``new_price``.

        The replacement goes to the end of the collection, not back into
        the old position, and is appended to the change log.
        """
        product = self.get_product_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(f"Product with id {product_id} doesn't exist")

        updated = product.with_price(to_price(new_price))
        self._products.remove(product)
        self._products.append(updated)
        self._changed_products.append(updated)
        logger.info(
            "Updated price of %s in warehouse %r: %s -> %s",
            product_id, self._name, product.price, updated.price,
        )
        return updated

    def get_changed_products(self) -> tuple[ProductRecord, ...]:
        """Return the price-change log, oldest first."""
        return tuple(self._changed_products)

    def get_products_grouped_by_categories(
        self,
    ) -> dict[Category, list[ProductRecord]]:
        grouped: dict[Category, list[ProductRecord]] = {}
        for product in self._products:
            grouped.setdefault(product.category, []).append(product)
        return grouped

    def get_products_by(self, category: Category) -> list[ProductRecord]:
        return [p for p in self._products if p.category == category]

    def clear_products(self) -> None:
        """Drop all products and the change log."""
        self._products.clear()
        self._changed_products.clear()
        logger.debug("Cleared warehouse %r", self._name)
