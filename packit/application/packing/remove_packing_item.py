"""
Use case: Remove an item from a packing list.

Input: RemovePackingItemCommand (packing_list_id, name)
Output: None
Side effects: The packing list is updated in the repository.
Failure cases: PackingListNotFoundError, PackingItemNotFoundError.
"""

import logging

from packit.application.packing.dtos import RemovePackingItemCommand
from packit.domain.packing.errors import PackingListNotFoundError
from packit.domain.packing.ports import PackingListRepository

logger = logging.getLogger(__name__)


class RemovePackingItemHandler:
    def __init__(self, repository: PackingListRepository) -> None:
        self._repository = repository

    async def handle(self, command: RemovePackingItemCommand) -> None:
        logger.info(
            "Removing item=%s from packing list=%s",
            command.name,
            command.packing_list_id,
        )

        packing_list = await self._repository.get(command.packing_list_id)
        if packing_list is None:
            raise PackingListNotFoundError(command.packing_list_id)

        packing_list.remove_item(command.name)

        await self._repository.update(packing_list)
