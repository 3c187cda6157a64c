"""
Use case: Create a packing list pre-filled with default items.

Input: CreatePackingListWithItemsCommand (id, name, days, gender, localization)
Output: None
Side effects: One new packing list persisted through the repository.
Failure cases: PackingListAlreadyExistsError, MissingLocalizationWeatherError.
"""

import logging

from packit.application.packing.dtos import CreatePackingListWithItemsCommand
from packit.application.packing.ports import PackingListReadService, WeatherService
from packit.domain.packing.errors import (
    MissingLocalizationWeatherError,
    PackingListAlreadyExistsError,
)
from packit.domain.packing.factory import PackingListFactory
from packit.domain.packing.ports import PackingListRepository
from packit.domain.packing.value_objects import Localization, Temperature, TravelDays

logger = logging.getLogger(__name__)


class CreatePackingListWithItemsHandler:
    """Orchestrates creation of a packing list with its default items.

    Guards run in order and stop at the first failure:
    the name must be free, then the weather at the destination
    must be resolvable. Only then is the list built and persisted,
    so a failed guard never leaves a partial write behind.
    """

    def __init__(
        self,
        repository: PackingListRepository,
        factory: PackingListFactory,
        read_service: PackingListReadService,
        weather_service: WeatherService,
    ) -> None:
        self._repository = repository
        self._factory = factory
        self._read_service = read_service
        self._weather_service = weather_service

    async def handle(self, command: CreatePackingListWithItemsCommand) -> None:
        """Run the create-with-items use case.

        Args:
            command: The trip profile and identity of the new list.

        Raises:
            PackingListAlreadyExistsError: If the name is already taken.
            MissingLocalizationWeatherError: If no weather could be resolved.
        """
        logger.info(
            "Creating packing list id=%s, name=%s, days=%d, gender=%s",
            command.id,
            command.name,
            command.days,
            command.gender.value,
        )

        if await self._read_service.exists_by_name(command.name):
            logger.warning("Packing list name already taken: %s", command.name)
            raise PackingListAlreadyExistsError(command.name)

        if command.localization is None:
            logger.warning("No localization given for packing list %s", command.id)
            raise MissingLocalizationWeatherError(None)

        localization = Localization(
            city=command.localization.city,
            country=command.localization.country,
        )

        weather = await self._weather_service.get_weather(localization)
        if weather is None:
            logger.warning("No weather data for localization=%s", localization)
            raise MissingLocalizationWeatherError(localization)

        packing_list = self._factory.create_with_default_items(
            command.id,
            command.name,
            TravelDays(command.days),
            command.gender,
            Temperature(weather.temperature),
            localization,
        )

        await self._repository.add(packing_list)
        logger.info("Packing list %s created", command.id)
