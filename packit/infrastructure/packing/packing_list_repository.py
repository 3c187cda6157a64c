"""
Adapter: SQL packing list repository.

Implements PackingListRepository port.
Persists PackingList aggregates to the packing_lists and packing_items
tables through an async SQLAlchemy engine.
"""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from packit.domain.packing.entities import Gender, PackingList
from packit.domain.packing.errors import (
    PackingListAlreadyExistsError,
    PackingListNotFoundError,
    PackingListVersionConflictError,
)
from packit.domain.packing.ports import PackingListRepository
from packit.domain.packing.value_objects import (
    Localization,
    PackingItem,
    Temperature,
    TravelDays,
)

logger = logging.getLogger(__name__)

_SELECT_LIST = text(
    """
    SELECT id, name, days, gender, temperature, city, country, version
    FROM packing_lists
    WHERE id = :id
    """
)

_SELECT_ITEMS = text(
    """
    SELECT name, quantity, is_packed
    FROM packing_items
    WHERE packing_list_id = :id
    ORDER BY position ASC
    """
)

_INSERT_LIST = text(
    """
    INSERT INTO packing_lists
        (id, name, days, gender, temperature, city, country, version)
    VALUES
        (:id, :name, :days, :gender, :temperature, :city, :country, :version)
    """
)

_UPDATE_LIST = text(
    """
    UPDATE packing_lists
    SET name = :name, days = :days, gender = :gender,
        temperature = :temperature, city = :city, country = :country,
        version = :new_version
    WHERE id = :id AND version = :version
    """
)

_INSERT_ITEM = text(
    """
    INSERT INTO packing_items
        (packing_list_id, position, name, quantity, is_packed)
    VALUES
        (:packing_list_id, :position, :name, :quantity, :is_packed)
    """
)

_LIST_EXISTS = text("SELECT 1 FROM packing_lists WHERE id = :id")
_DELETE_ITEMS = text("DELETE FROM packing_items WHERE packing_list_id = :id")
_DELETE_LIST = text("DELETE FROM packing_lists WHERE id = :id")


def _list_params(packing_list: PackingList) -> dict:
    return {
        "id": str(packing_list.id),
        "name": packing_list.name,
        "days": packing_list.days.value,
        "gender": packing_list.gender.value,
        "temperature": float(packing_list.temperature.value),
        "city": packing_list.localization.city,
        "country": packing_list.localization.country,
        "version": packing_list.version,
    }


class SqlPackingListRepository(PackingListRepository):
    """SQL implementation of the packing list repository.

    ``add`` relies on the UNIQUE constraint on ``packing_lists.name``
    to reject duplicates that slipped past the read-side check.
    ``update`` uses the ``version`` column for optimistic concurrency.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    async def get(self, packing_list_id: UUID) -> Optional[PackingList]:
        """Return a packing list with its items, or None if not found."""
        async with self._engine.connect() as conn:
            row = (
                await conn.execute(_SELECT_LIST, {"id": str(packing_list_id)})
            ).mappings().first()
            if row is None:
                return None

            item_rows = (
                await conn.execute(_SELECT_ITEMS, {"id": str(packing_list_id)})
            ).mappings().all()

        return PackingList(
            id=UUID(row["id"]),
            name=row["name"],
            days=TravelDays(row["days"]),
            gender=Gender(row["gender"]),
            temperature=Temperature(float(row["temperature"])),
            localization=Localization(city=row["city"], country=row["country"]),
            items=[
                PackingItem(
                    name=item["name"],
                    quantity=item["quantity"],
                    is_packed=bool(item["is_packed"]),
                )
                for item in item_rows
            ],
            version=row["version"],
        )

    async def add(self, packing_list: PackingList) -> None:
        """Insert a new packing list and its items in one transaction.

        Raises:
            PackingListAlreadyExistsError: If the ID or name is already stored.
        """
        try:
            async with self._engine.begin() as conn:
                await conn.execute(_INSERT_LIST, _list_params(packing_list))
                await self._insert_items(conn, packing_list)
        except IntegrityError as exc:
            logger.warning(
                "Rejected duplicate packing list name=%s", packing_list.name
            )
            raise PackingListAlreadyExistsError(packing_list.name) from exc

        logger.debug("Inserted packing list %s", packing_list.id)

    async def update(self, packing_list: PackingList) -> None:
        """Rewrite a packing list and its items if the version still matches.

        Raises:
            PackingListNotFoundError: If the list was deleted meanwhile.
            PackingListVersionConflictError: If the stored version moved on.
        """
        params = _list_params(packing_list)
        params["new_version"] = packing_list.version + 1

        async with self._engine.begin() as conn:
            result = await conn.execute(_UPDATE_LIST, params)
            if result.rowcount == 0:
                exists = await conn.execute(_LIST_EXISTS, {"id": str(packing_list.id)})
                if exists.first() is None:
                    raise PackingListNotFoundError(packing_list.id)
                raise PackingListVersionConflictError(
                    packing_list.id, packing_list.version
                )
            await conn.execute(_DELETE_ITEMS, {"id": str(packing_list.id)})
            await self._insert_items(conn, packing_list)

        packing_list.version += 1

    async def delete(self, packing_list: PackingList) -> None:
        async with self._engine.begin() as conn:
            await conn.execute(_DELETE_ITEMS, {"id": str(packing_list.id)})
            await conn.execute(_DELETE_LIST, {"id": str(packing_list.id)})

    async def _insert_items(
        self, conn: AsyncConnection, packing_list: PackingList
    ) -> None:
        if not packing_list.items:
            return

        await conn.execute(
            _INSERT_ITEM,
            [
                {
                    "packing_list_id": str(packing_list.id),
                    "position": position,
                    "name": item.name,
                    "quantity": item.quantity,
                    "is_packed": item.is_packed,
                }
                for position, item in enumerate(packing_list.items)
            ],
        )
