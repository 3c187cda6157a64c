"""
Use case: Delete a packing list.

Input: RemovePackingListCommand (id)
Output: None
Side effects: The packing list and its items are removed.
Failure cases: PackingListNotFoundError.
"""

import logging

from packit.application.packing.dtos import RemovePackingListCommand
from packit.domain.packing.errors import PackingListNotFoundError
from packit.domain.packing.ports import PackingListRepository

logger = logging.getLogger(__name__)


class RemovePackingListHandler:
    def __init__(self, repository: PackingListRepository) -> None:
        self._repository = repository

    async def handle(self, command: RemovePackingListCommand) -> None:
        logger.info("Removing packing list=%s", command.id)

        packing_list = await self._repository.get(command.id)
        if packing_list is None:
            raise PackingListNotFoundError(command.id)

        await self._repository.delete(packing_list)
