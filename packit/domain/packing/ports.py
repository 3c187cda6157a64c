"""
Port interfaces (ABCs) for the packing bounded context domain.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from packit.domain.packing.entities import PackingList


class PackingListRepository(ABC):
    """Port for persisting and retrieving PackingList aggregates."""

    @abstractmethod
    async def get(self, packing_list_id: UUID) -> Optional[PackingList]:
        """Return a packing list by its ID, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    async def add(self, packing_list: PackingList) -> None:
        """Persist a new packing list.

        Once this returns the list is retrievable by ``get``.

        Raises:
            PackingListAlreadyExistsError: If the name is already taken.
        """
        raise NotImplementedError

    @abstractmethod
    async def update(self, packing_list: PackingList) -> None:
        """Persist changes to an existing packing list.

        Raises:
            PackingListVersionConflictError: If the stored version moved on.
        """
        raise NotImplementedError

    @abstractmethod
    async def delete(self, packing_list: PackingList) -> None:
        """Remove a packing list and its items."""
        raise NotImplementedError
