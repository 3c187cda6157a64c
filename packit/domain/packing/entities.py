"""
Domain entities for the packing bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from enum import Enum
from uuid import UUID

from packit.domain.packing.errors import (
    EmptyPackingListIdError,
    EmptyPackingListNameError,
    PackingItemAlreadyExistsError,
    PackingItemNotFoundError,
)
from packit.domain.packing.value_objects import (
    Localization,
    PackingItem,
    Temperature,
    TravelDays,
)

NIL_UUID = UUID(int=0)


class Gender(Enum):
    """Traveler gender category used by the packing-item policies."""

    MALE = "male"
    FEMALE = "female"


@dataclass
class PackingList:
    """A named, ordered list of items prepared for one trip.

    The list is the aggregate root: items are only changed through
    its methods, which keep item names unique within the list.
    ``version`` is maintained by the repository for optimistic concurrency.
    """

    id: UUID
    name: str
    days: TravelDays
    gender: Gender
    temperature: Temperature
    localization: Localization
    items: list[PackingItem] = field(default_factory=list)
    version: int = 0

    def __post_init__(self) -> None:
        if self.id == NIL_UUID:
            raise EmptyPackingListIdError()
        if not self.name.strip():
            raise EmptyPackingListNameError()

    def add_item(self, item: PackingItem) -> None:
        """Append an item to the list.

        Raises:
            PackingItemAlreadyExistsError: If an item with the same name exists.
        """
        if any(existing.name == item.name for existing in self.items):
            raise PackingItemAlreadyExistsError(self.name, item.name)
        self.items.append(item)

    def add_items(self, items: list[PackingItem]) -> None:
        for item in items:
            self.add_item(item)

    def pack_item(self, item_name: str) -> None:
        """Mark the named item as packed.

        Raises:
            PackingItemNotFoundError: If no item has that name.
        """
        index = self._index_of(item_name)
        self.items[index] = self.items[index].packed()

    def remove_item(self, item_name: str) -> None:
        """Remove the named item from the list.

        Raises:
            PackingItemNotFoundError: If no item has that name.
        """
        del self.items[self._index_of(item_name)]

    def _index_of(self, item_name: str) -> int:
        for index, item in enumerate(self.items):
            if item.name == item_name:
                return index
        raise PackingItemNotFoundError(item_name)
