"""
PackingList factory.

Builds fully initialized PackingList aggregates. The default-items
variant runs the trip profile through the packing-item policies.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from packit.domain.packing.entities import Gender, PackingList
from packit.domain.packing.policies import (
    PackingItemsPolicy,
    PolicyData,
    default_policies,
)
from packit.domain.packing.value_objects import Localization, Temperature, TravelDays

logger = logging.getLogger(__name__)


class PackingListFactory(ABC):
    """Contract for building PackingList aggregates."""

    @abstractmethod
    def create(
        self,
        id: UUID,
        name: str,
        days: TravelDays,
        gender: Gender,
        temperature: Temperature,
        localization: Localization,
    ) -> PackingList:
        """Return an empty packing list for the given trip."""
        raise NotImplementedError

    @abstractmethod
    def create_with_default_items(
        self,
        id: UUID,
        name: str,
        days: TravelDays,
        gender: Gender,
        temperature: Temperature,
        localization: Localization,
    ) -> PackingList:
        """Return a packing list pre-filled with the default items for the trip."""
        raise NotImplementedError


class PolicyPackingListFactory(PackingListFactory):
    """Factory that derives default items from packing-item policies.

    Policies are evaluated in the order given; the items of every
    applicable policy are added to the new list.
    """

    def __init__(self, policies: Optional[list[PackingItemsPolicy]] = None) -> None:
        self._policies = policies if policies is not None else default_policies()

    def create(
        self,
        id: UUID,
        name: str,
        days: TravelDays,
        gender: Gender,
        temperature: Temperature,
        localization: Localization,
    ) -> PackingList:
        return PackingList(
            id=id,
            name=name,
            days=days,
            gender=gender,
            temperature=temperature,
            localization=localization,
        )

    def create_with_default_items(
        self,
        id: UUID,
        name: str,
        days: TravelDays,
        gender: Gender,
        temperature: Temperature,
        localization: Localization,
    ) -> PackingList:
        data = PolicyData(
            days=days,
            gender=gender,
            temperature=temperature,
            localization=localization,
        )
        applicable = [policy for policy in self._policies if policy.is_applicable(data)]
        items = [item for policy in applicable for item in policy.generate_items(data)]

        packing_list = self.create(id, name, days, gender, temperature, localization)
        packing_list.add_items(items)

        logger.debug(
            "Built packing list %s with %d default items from %d policies",
            id,
            len(items),
            len(applicable),
        )
        return packing_list
