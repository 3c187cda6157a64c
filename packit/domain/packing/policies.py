"""
Packing-item policies.

Each policy decides whether it applies to a trip and, if so,
which default items it contributes. The factory evaluates every
policy in order and concatenates the generated items.

Policies:
    basic            — always; clothes and essentials
    male gender      — gender is MALE
    female gender    — gender is FEMALE
    low temperature  — temperature < 10 °C
    high temperature — temperature > 25 °C
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from packit.domain.packing.entities import Gender
from packit.domain.packing.value_objects import (
    Localization,
    PackingItem,
    Temperature,
    TravelDays,
)

MAX_CLOTHES_QUANTITY = 7
LOW_TEMPERATURE_THRESHOLD = 10
HIGH_TEMPERATURE_THRESHOLD = 25


@dataclass(frozen=True)
class PolicyData:
    """Trip attributes the policies are evaluated against."""

    days: TravelDays
    gender: Gender
    temperature: Temperature
    localization: Localization


class PackingItemsPolicy(ABC):
    """Contract for a rule that contributes default packing items."""

    @abstractmethod
    def is_applicable(self, data: PolicyData) -> bool:
        raise NotImplementedError

    @abstractmethod
    def generate_items(self, data: PolicyData) -> list[PackingItem]:
        raise NotImplementedError


class BasicPolicy(PackingItemsPolicy):
    """Clothes scaled to the trip length, plus essentials for every trip."""

    def is_applicable(self, data: PolicyData) -> bool:
        return True

    def generate_items(self, data: PolicyData) -> list[PackingItem]:
        clothes = min(data.days.value, MAX_CLOTHES_QUANTITY)
        return [
            PackingItem("Pants", clothes),
            PackingItem("Socks", clothes),
            PackingItem("T-Shirt", clothes),
            PackingItem("Trousers", 1 if data.days.value < 7 else 2),
            PackingItem("Shampoo", 1),
            PackingItem("Toothbrush", 1),
            PackingItem("Toothpaste", 1),
            PackingItem("Towel", 1),
            PackingItem("Bag pack", 1),
            PackingItem("Passport", 1),
            PackingItem("Phone Charger", 1),
        ]


class MaleGenderPolicy(PackingItemsPolicy):
    def is_applicable(self, data: PolicyData) -> bool:
        return data.gender is Gender.MALE

    def generate_items(self, data: PolicyData) -> list[PackingItem]:
        return [
            PackingItem("Laptop", 1),
            PackingItem("Beer", 10),
            PackingItem("Book", math.ceil(data.days.value / 7)),
        ]


class FemaleGenderPolicy(PackingItemsPolicy):
    def is_applicable(self, data: PolicyData) -> bool:
        return data.gender is Gender.FEMALE

    def generate_items(self, data: PolicyData) -> list[PackingItem]:
        return [
            PackingItem("Lipstick", 1),
            PackingItem("Powder", 1),
            PackingItem("Eyeliner", 1),
        ]


class LowTemperaturePolicy(PackingItemsPolicy):
    def is_applicable(self, data: PolicyData) -> bool:
        return data.temperature.value < LOW_TEMPERATURE_THRESHOLD

    def generate_items(self, data: PolicyData) -> list[PackingItem]:
        return [
            PackingItem("Winter hat", 1),
            PackingItem("Scarf", 1),
            PackingItem("Gloves", 1),
            PackingItem("Hoodie", 1),
            PackingItem("Warm jacket", 1),
        ]


class HighTemperaturePolicy(PackingItemsPolicy):
    def is_applicable(self, data: PolicyData) -> bool:
        return data.temperature.value > HIGH_TEMPERATURE_THRESHOLD

    def generate_items(self, data: PolicyData) -> list[PackingItem]:
        return [
            PackingItem("Hat", 1),
            PackingItem("Sunglasses", 1),
            PackingItem("Cream with UV filter", 1),
        ]


def default_policies() -> list[PackingItemsPolicy]:
    """Return the policies applied when creating a list with default items."""
    return [
        BasicPolicy(),
        MaleGenderPolicy(),
        FemaleGenderPolicy(),
        LowTemperaturePolicy(),
        HighTemperaturePolicy(),
    ]
