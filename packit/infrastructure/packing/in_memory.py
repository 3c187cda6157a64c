"""
Adapter: In-memory packing list storage.

Implements PackingListRepository and PackingListReadService over a
shared process-local store. Used as the default backend for local
development and as a lightweight backend in tests.

Aggregates are deep-copied on the way in and out so callers never
share mutable state with the store.
"""

import copy
import logging
from typing import Optional
from uuid import UUID

from packit.application.packing.dtos import (
    LocalizationDto,
    PackingItemDto,
    PackingListDto,
)
from packit.application.packing.ports import PackingListReadService
from packit.domain.packing.entities import PackingList
from packit.domain.packing.errors import (
    PackingListAlreadyExistsError,
    PackingListNotFoundError,
    PackingListVersionConflictError,
)
from packit.domain.packing.ports import PackingListRepository

logger = logging.getLogger(__name__)


def to_packing_list_dto(packing_list: PackingList) -> PackingListDto:
    """Map a PackingList aggregate to its read-side DTO."""
    return PackingListDto(
        id=packing_list.id,
        name=packing_list.name,
        days=packing_list.days.value,
        gender=packing_list.gender.value,
        temperature=packing_list.temperature.value,
        localization=LocalizationDto(
            city=packing_list.localization.city,
            country=packing_list.localization.country,
        ),
        items=[
            PackingItemDto(
                name=item.name,
                quantity=item.quantity,
                is_packed=item.is_packed,
            )
            for item in packing_list.items
        ],
    )


class InMemoryPackingListStore:
    """Process-local store of packing lists keyed by ID.

    Names are indexed so uniqueness holds even when two creations
    pass the read-side existence check concurrently.
    """

    def __init__(self) -> None:
        self._lists: dict[UUID, PackingList] = {}

    def get(self, packing_list_id: UUID) -> Optional[PackingList]:
        stored = self._lists.get(packing_list_id)
        return copy.deepcopy(stored) if stored is not None else None

    def all(self) -> list[PackingList]:
        return [copy.deepcopy(stored) for stored in self._lists.values()]

    def insert(self, packing_list: PackingList) -> None:
        if packing_list.id in self._lists or self.name_taken(packing_list.name):
            raise PackingListAlreadyExistsError(packing_list.name)
        self._lists[packing_list.id] = copy.deepcopy(packing_list)

    def replace(self, packing_list: PackingList) -> None:
        stored = self._lists.get(packing_list.id)
        if stored is None:
            raise PackingListNotFoundError(packing_list.id)
        if stored.version != packing_list.version:
            raise PackingListVersionConflictError(packing_list.id, packing_list.version)
        packing_list.version += 1
        self._lists[packing_list.id] = copy.deepcopy(packing_list)

    def remove(self, packing_list_id: UUID) -> None:
        self._lists.pop(packing_list_id, None)

    def name_taken(self, name: str) -> bool:
        return any(stored.name == name for stored in self._lists.values())


class InMemoryPackingListRepository(PackingListRepository):
    """PackingListRepository backed by an InMemoryPackingListStore."""

    def __init__(self, store: InMemoryPackingListStore) -> None:
        self._store = store

    async def get(self, packing_list_id: UUID) -> Optional[PackingList]:
        return self._store.get(packing_list_id)

    async def add(self, packing_list: PackingList) -> None:
        self._store.insert(packing_list)
        logger.debug("Stored packing list %s in memory", packing_list.id)

    async def update(self, packing_list: PackingList) -> None:
        self._store.replace(packing_list)

    async def delete(self, packing_list: PackingList) -> None:
        self._store.remove(packing_list.id)


class InMemoryPackingListReadService(PackingListReadService):
    """PackingListReadService backed by an InMemoryPackingListStore."""

    def __init__(self, store: InMemoryPackingListStore) -> None:
        self._store = store

    async def exists_by_name(self, name: str) -> bool:
        return self._store.name_taken(name)

    async def get_by_id(self, packing_list_id: UUID) -> Optional[PackingListDto]:
        packing_list = self._store.get(packing_list_id)
        return to_packing_list_dto(packing_list) if packing_list is not None else None

    async def search(self, search_phrase: Optional[str] = None) -> list[PackingListDto]:
        phrase = (search_phrase or "").strip().lower()
        matches = [
            packing_list
            for packing_list in self._store.all()
            if phrase in packing_list.name.lower()
        ]
        return [
            to_packing_list_dto(packing_list)
            for packing_list in sorted(matches, key=lambda p: p.name)
        ]
