"""Abstract store of named Warehouse instances.

Defined in the domain layer so the domain never depends on
infrastructure. The concrete in-memory store lives in the
infrastructure layer and is handed to callers by the composition root.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from warehouse.domain.model.warehouse import Warehouse

DEFAULT_WAREHOUSE_NAME = "Default"


class WarehouseRepository(ABC):

    @abstractmethod
    def get(self, name: str = DEFAULT_WAREHOUSE_NAME) -> Warehouse:
        """Return the warehouse for ``name``, creating it on first access.

        Every access after the first clears the warehouse before returning
        it, so a repeated ``get`` always hands back an empty warehouse.
        """

    @abstractmethod
    def contains(self, name: str) -> bool:
        """Return whether ``name`` has ever been requested. Never resets."""

    @abstractmethod
    def names(self) -> list[str]:
        """Return every requested name, in order of first request."""
