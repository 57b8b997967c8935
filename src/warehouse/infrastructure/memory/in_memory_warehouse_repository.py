"""Dict-backed implementation of WarehouseRepository."""

from __future__ import annotations

import logging

from warehouse.domain.model.warehouse import Warehouse
from warehouse.domain.repository.warehouse_repository import (
    DEFAULT_WAREHOUSE_NAME,
    WarehouseRepository,
)

logger = logging.getLogger(__name__)


class InMemoryWarehouseRepository(WarehouseRepository):

    def __init__(self) -> None:
        self._store: dict[str, Warehouse] = {}

    # --- WarehouseRepository interface ----------------------------------------

    def get(self, name: str = DEFAULT_WAREHOUSE_NAME) -> Warehouse:
        instance = self._store.get(name)
        if instance is None:
            instance = Warehouse(name)
            self._store[name] = instance
            logger.info("Created warehouse %r", name)
        else:
            logger.debug("Resetting warehouse %r on repeated access", name)
            instance.clear_products()
        return instance

    def contains(self, name: str) -> bool:
        return name in self._store

    def names(self) -> list[str]:
        return list(self._store)
