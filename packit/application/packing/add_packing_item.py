"""
Use case: Add an item to an existing packing list.

Input: AddPackingItemCommand (packing_list_id, name, quantity)
Output: None
Side effects: The packing list is updated in the repository.
Failure cases: PackingListNotFoundError, PackingItemAlreadyExistsError.
"""

import logging

from packit.application.packing.dtos import AddPackingItemCommand
from packit.domain.packing.errors import PackingListNotFoundError
from packit.domain.packing.ports import PackingListRepository
from packit.domain.packing.value_objects import PackingItem

logger = logging.getLogger(__name__)


class AddPackingItemHandler:
    """Loads the packing list, appends the item and saves the list."""

    def __init__(self, repository: PackingListRepository) -> None:
        self._repository = repository

    async def handle(self, command: AddPackingItemCommand) -> None:
        logger.info(
            "Adding item=%s (x%d) to packing list=%s",
            command.name,
            command.quantity,
            command.packing_list_id,
        )

        packing_list = await self._repository.get(command.packing_list_id)
        if packing_list is None:
            raise PackingListNotFoundError(command.packing_list_id)

        packing_list.add_item(PackingItem(command.name, command.quantity))

        await self._repository.update(packing_list)
