"""
Use case: Search packing lists by name.

Input: SearchPackingListsQuery (search_phrase)
Output: list[PackingListDto]
Side effects: None.
"""

import logging

from packit.application.packing.dtos import PackingListDto, SearchPackingListsQuery
from packit.application.packing.ports import PackingListReadService

logger = logging.getLogger(__name__)


class SearchPackingListsHandler:
    def __init__(self, read_service: PackingListReadService) -> None:
        self._read_service = read_service

    async def handle(self, query: SearchPackingListsQuery) -> list[PackingListDto]:
        logger.debug("Searching packing lists phrase=%r", query.search_phrase)
        return await self._read_service.search(query.search_phrase)
