"""
Adapter: SQL packing list read service.

Implements PackingListReadService port.
Answers existence and lookup queries straight from the tables,
building DTOs without loading PackingList aggregates.
"""

import logging
from collections import defaultdict
from typing import Optional
from uuid import UUID

from sqlalchemy import bindparam, text
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from packit.application.packing.dtos import (
    LocalizationDto,
    PackingItemDto,
    PackingListDto,
)
from packit.application.packing.ports import PackingListReadService

logger = logging.getLogger(__name__)

_LIST_COLUMNS = "id, name, days, gender, temperature, city, country"


def _like_pattern(phrase: str) -> str:
    """Build a LIKE pattern matching the phrase literally as a substring."""
    escaped = phrase.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class SqlPackingListReadService(PackingListReadService):
    """Read-side queries over the packing tables."""

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    async def exists_by_name(self, name: str) -> bool:
        async with self._engine.connect() as conn:
            result = await conn.execute(
                text("SELECT 1 FROM packing_lists WHERE name = :name LIMIT 1"),
                {"name": name},
            )
            return result.first() is not None

    async def get_by_id(self, packing_list_id: UUID) -> Optional[PackingListDto]:
        async with self._engine.connect() as conn:
            rows = (
                await conn.execute(
                    text(f"SELECT {_LIST_COLUMNS} FROM packing_lists WHERE id = :id"),
                    {"id": str(packing_list_id)},
                )
            ).mappings().all()
            found = await self._to_dtos(conn, rows)

        return found[0] if found else None

    async def search(self, search_phrase: Optional[str] = None) -> list[PackingListDto]:
        """Return lists whose name contains the phrase, ordered by name.

        Names are ordered by code point so the order does not depend on
        the database collation.
        """
        phrase = (search_phrase or "").strip().lower()

        async with self._engine.connect() as conn:
            rows = (
                await conn.execute(
                    text(
                        f"""
                        SELECT {_LIST_COLUMNS}
                        FROM packing_lists
                        WHERE LOWER(name) LIKE :pattern ESCAPE '\\'
                        """
                    ),
                    {"pattern": _like_pattern(phrase)},
                )
            ).mappings().all()
            rows = sorted(rows, key=lambda row: row["name"])
            results = await self._to_dtos(conn, rows)

        logger.debug("Search phrase=%r matched %d lists", search_phrase, len(results))
        return results

    async def _to_dtos(self, conn: AsyncConnection, rows) -> list[PackingListDto]:
        """Attach items to list rows and map them to DTOs, keeping row order."""
        if not rows:
            return []

        item_rows = (
            await conn.execute(
                text(
                    """
                    SELECT packing_list_id, name, quantity, is_packed
                    FROM packing_items
                    WHERE packing_list_id IN :ids
                    ORDER BY packing_list_id, position ASC
                    """
                ).bindparams(bindparam("ids", expanding=True)),
                {"ids": [row["id"] for row in rows]},
            )
        ).mappings().all()

        items_by_list: dict[str, list[PackingItemDto]] = defaultdict(list)
        for item in item_rows:
            items_by_list[item["packing_list_id"]].append(
                PackingItemDto(
                    name=item["name"],
                    quantity=item["quantity"],
                    is_packed=bool(item["is_packed"]),
                )
            )

        return [
            PackingListDto(
                id=UUID(row["id"]),
                name=row["name"],
                days=row["days"],
                gender=row["gender"],
                temperature=float(row["temperature"]),
                localization=LocalizationDto(city=row["city"], country=row["country"]),
                items=items_by_list[row["id"]],
            )
            for row in rows
        ]
