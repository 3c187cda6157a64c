"""
Value objects for the packing bounded context.

Value objects are immutable and compared by value.
Each one validates itself on construction.
"""

from dataclasses import dataclass, replace

from packit.domain.packing.errors import (
    EmptyPackingItemNameError,
    InvalidLocalizationError,
    InvalidPackingItemQuantityError,
    InvalidTemperatureError,
    InvalidTravelDaysError,
)

MIN_TEMPERATURE = -100
MAX_TEMPERATURE = 100
MIN_TRAVEL_DAYS = 1
MAX_TRAVEL_DAYS = 100


@dataclass(frozen=True)
class Temperature:
    """Resolved air temperature at the trip destination, in degrees Celsius."""

    value: float

    def __post_init__(self) -> None:
        if not MIN_TEMPERATURE <= self.value <= MAX_TEMPERATURE:
            raise InvalidTemperatureError(self.value)


@dataclass(frozen=True)
class TravelDays:
    """Trip duration in days."""

    value: int

    def __post_init__(self) -> None:
        if not MIN_TRAVEL_DAYS <= self.value <= MAX_TRAVEL_DAYS:
            raise InvalidTravelDaysError(self.value)


@dataclass(frozen=True)
class Localization:
    """A city/country pair, used as the weather lookup key.

    The text form is ``"City,Country"``.
    """

    city: str
    country: str

    def __post_init__(self) -> None:
        if not self.city.strip() or not self.country.strip():
            raise InvalidLocalizationError(f"{self.city},{self.country}")

    @classmethod
    def parse(cls, value: str) -> "Localization":
        """Build a Localization from its ``"City,Country"`` text form."""
        city, sep, country = value.partition(",")
        if not sep:
            raise InvalidLocalizationError(value)
        return cls(city=city.strip(), country=country.strip())

    def __str__(self) -> str:
        return f"{self.city},{self.country}"


@dataclass(frozen=True)
class PackingItem:
    """A single item to take on the trip."""

    name: str
    quantity: int
    is_packed: bool = False

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise EmptyPackingItemNameError()
        if self.quantity < 1:
            raise InvalidPackingItemQuantityError(self.quantity)

    def packed(self) -> "PackingItem":
        """Return a copy of this item marked as packed."""
        return replace(self, is_packed=True)
