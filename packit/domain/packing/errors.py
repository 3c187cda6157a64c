"""
Domain-specific errors for the packing bounded context.

All errors raised from the domain and application layers must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from uuid import UUID


class PackingDomainError(Exception):
    """Base error for all packing domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class EmptyPackingListIdError(PackingDomainError):
    """Raised when a packing list is given the nil UUID as identity."""

    def __init__(self) -> None:
        super().__init__("Packing list ID cannot be empty.")


class EmptyPackingListNameError(PackingDomainError):
    """Raised when a packing list name is blank."""

    def __init__(self) -> None:
        super().__init__("Packing list name cannot be empty.")


class EmptyPackingItemNameError(PackingDomainError):
    """Raised when a packing item name is blank."""

    def __init__(self) -> None:
        super().__init__("Packing item name cannot be empty.")


class InvalidPackingItemQuantityError(PackingDomainError):
    """Raised when a packing item quantity is not a positive integer."""

    def __init__(self, quantity: int) -> None:
        super().__init__(f"Packing item quantity must be positive, got {quantity}.")
        self.quantity = quantity


class InvalidTemperatureError(PackingDomainError):
    """Raised when a temperature is outside the supported range."""

    def __init__(self, value: float) -> None:
        super().__init__(
            f"Temperature {value} is invalid. Must be between -100 and 100."
        )
        self.value = value


class InvalidTravelDaysError(PackingDomainError):
    """Raised when the trip duration is outside the supported range."""

    def __init__(self, days: int) -> None:
        super().__init__(f"Travel days {days} is invalid. Must be between 1 and 100.")
        self.days = days


class InvalidLocalizationError(PackingDomainError):
    """Raised when a localization has a blank city or country."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Localization '{value}' is invalid.")
        self.value = value


class PackingItemAlreadyExistsError(PackingDomainError):
    """Raised when an item with the same name is already on the list."""

    def __init__(self, list_name: str, item_name: str) -> None:
        super().__init__(
            f"Packing list '{list_name}' already defined item '{item_name}'."
        )
        self.list_name = list_name
        self.item_name = item_name


class PackingItemNotFoundError(PackingDomainError):
    """Raised when an item cannot be found on a packing list."""

    def __init__(self, item_name: str) -> None:
        super().__init__(f"Packing item '{item_name}' was not found.")
        self.item_name = item_name


class PackingListAlreadyExistsError(PackingDomainError):
    """Raised when a packing list with the same name already exists."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Packing list with name '{name}' already exists.")
        self.name = name


class PackingListNotFoundError(PackingDomainError):
    """Raised when a packing list cannot be found."""

    def __init__(self, packing_list_id: UUID) -> None:
        super().__init__(f"Packing list with ID '{packing_list_id}' was not found.")
        self.packing_list_id = packing_list_id


class PackingListVersionConflictError(PackingDomainError):
    """Raised when a packing list was modified by someone else in the meantime."""

    def __init__(self, packing_list_id: UUID, expected_version: int) -> None:
        super().__init__(
            f"Packing list '{packing_list_id}' was modified concurrently "
            f"(expected version {expected_version})."
        )
        self.packing_list_id = packing_list_id
        self.expected_version = expected_version


class MissingLocalizationWeatherError(PackingDomainError):
    """Raised when no weather data can be resolved for a localization."""

    def __init__(self, localization: object | None) -> None:
        if localization is None:
            message = "Couldn't fetch weather data: no localization was given."
        else:
            message = f"Couldn't fetch weather data for localization '{localization}'."
        super().__init__(message)
        self.localization = localization


class WeatherServiceUnavailableError(PackingDomainError):
    """Raised when the weather provider cannot be reached after retries."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Weather service unavailable: {reason}")
        self.reason = reason
