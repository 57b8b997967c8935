"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from warehouse.domain.model.product import ProductRecord


@dataclass(frozen=True)
class ProductDTO:
    """Output: a single product as displayed to the user."""

    id: str
    name: str
    category: str
    price: str  # formatted, e.g. "9.99"

    @staticmethod
    def from_record(record: ProductRecord) -> ProductDTO:
        return ProductDTO(
            id=str(record.id),
            name=record.name,
            category=str(record.category),
            price=f"{record.price:.2f}",
        )
