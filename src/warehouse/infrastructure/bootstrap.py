"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from warehouse.domain.repository.warehouse_repository import (
    DEFAULT_WAREHOUSE_NAME,
)
from warehouse.infrastructure.memory.in_memory_warehouse_repository import (
    InMemoryWarehouseRepository,
)

__all__ = ["DEFAULT_WAREHOUSE_NAME", "warehouse_repository"]


def warehouse_repository() -> InMemoryWarehouseRepository:
    return InMemoryWarehouseRepository()
