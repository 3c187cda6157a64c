"""
Data Transfer Objects for the packing application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass, field
from uuid import UUID

from packit.domain.packing.entities import Gender


@dataclass(frozen=True)
class LocalizationWriteModel:
    """Localization as submitted by the client.

    Attributes:
        city: City name.
        country: Country name.
    """

    city: str
    country: str


@dataclass(frozen=True)
class CreatePackingListWithItemsCommand:
    """Input DTO for creating a packing list with its default items.

    Attributes:
        id: Identity the new list will carry.
        name: List name, unique among all lists.
        days: Trip duration in days (1-100).
        gender: Traveler gender category.
        localization: Trip destination. Required to resolve the weather.
    """

    id: UUID
    name: str
    days: int
    gender: Gender
    localization: LocalizationWriteModel | None = None


@dataclass(frozen=True)
class AddPackingItemCommand:
    """Input DTO for adding an item to an existing list."""

    packing_list_id: UUID
    name: str
    quantity: int


@dataclass(frozen=True)
class PackItemCommand:
    """Input DTO for marking an item as packed."""

    packing_list_id: UUID
    name: str


@dataclass(frozen=True)
class RemovePackingItemCommand:
    """Input DTO for removing an item from a list."""

    packing_list_id: UUID
    name: str


@dataclass(frozen=True)
class RemovePackingListCommand:
    """Input DTO for deleting a packing list."""

    id: UUID


@dataclass(frozen=True)
class GetPackingListQuery:
    """Input DTO for retrieving a single packing list."""

    id: UUID


@dataclass(frozen=True)
class SearchPackingListsQuery:
    """Input DTO for searching packing lists by name.

    Attributes:
        search_phrase: Case-insensitive fragment of the name. None returns all.
    """

    search_phrase: str | None = None


@dataclass(frozen=True)
class WeatherDto:
    """Weather reading returned by the weather service.

    Attributes:
        temperature: Current temperature in degrees Celsius.
    """

    temperature: float


@dataclass(frozen=True)
class LocalizationDto:
    city: str
    country: str


@dataclass(frozen=True)
class PackingItemDto:
    name: str
    quantity: int
    is_packed: bool


@dataclass(frozen=True)
class PackingListDto:
    """Output DTO for a packing list as seen by readers.

    Attributes:
        id: List identity.
        name: List name.
        days: Trip duration in days.
        gender: Traveler gender category value.
        temperature: Temperature resolved when the list was created.
        localization: Trip destination.
        items: Items in list order.
    """

    id: UUID
    name: str
    days: int
    gender: str
    temperature: float
    localization: LocalizationDto
    items: list[PackingItemDto] = field(default_factory=list)
