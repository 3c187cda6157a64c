"""
Port interfaces (ABCs) required by the packing application layer.

The read service answers queries without loading aggregates.
The weather service is an external, potentially unreliable integration.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from packit.application.packing.dtos import PackingListDto, WeatherDto
from packit.domain.packing.value_objects import Localization


class PackingListReadService(ABC):
    """Port for read-side packing list queries."""

    @abstractmethod
    async def exists_by_name(self, name: str) -> bool:
        """Return True if a packing list with this exact name exists."""
        raise NotImplementedError

    @abstractmethod
    async def get_by_id(self, packing_list_id: UUID) -> Optional[PackingListDto]:
        """Return a packing list view by its ID, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    async def search(self, search_phrase: Optional[str] = None) -> list[PackingListDto]:
        """Return lists whose name contains the phrase, case-insensitively.

        Args:
            search_phrase: Name fragment. None or blank returns every list.

        Returns:
            Matching lists ordered by name.
        """
        raise NotImplementedError


class WeatherService(ABC):
    """Port for resolving the weather at a localization."""

    @abstractmethod
    async def get_weather(self, localization: Localization) -> Optional[WeatherDto]:
        """Return the current weather, or None if the localization is unknown.

        Raises:
            WeatherServiceUnavailableError: If the provider cannot be reached.
        """
        raise NotImplementedError
