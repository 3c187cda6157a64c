"""
Use case: Get a single packing list.

Input: GetPackingListQuery (id)
Output: PackingListDto
Side effects: None.
Failure cases: PackingListNotFoundError.
"""

import logging

from packit.application.packing.dtos import GetPackingListQuery, PackingListDto
from packit.application.packing.ports import PackingListReadService
from packit.domain.packing.errors import PackingListNotFoundError

logger = logging.getLogger(__name__)


class GetPackingListHandler:
    """Reads a packing list view through the read service."""

    def __init__(self, read_service: PackingListReadService) -> None:
        self._read_service = read_service

    async def handle(self, query: GetPackingListQuery) -> PackingListDto:
        """Return the packing list with the given ID.

        Raises:
            PackingListNotFoundError: If no list has that ID.
        """
        logger.debug("Fetching packing list=%s", query.id)

        packing_list = await self._read_service.get_by_id(query.id)
        if packing_list is None:
            raise PackingListNotFoundError(query.id)
        return packing_list
