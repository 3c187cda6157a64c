"""
Shared fixtures for the PackIT test suite.
"""

from uuid import uuid4

import pytest

from packit.domain.packing.entities import Gender, PackingList
from packit.domain.packing.value_objects import Localization, Temperature, TravelDays
from packit.shared.security.rate_limiting import limiter


@pytest.fixture(autouse=True)
def _disable_rate_limiting():
    """Keep the per-client budget from interfering with API tests."""
    previous = limiter.enabled
    limiter.enabled = False
    yield
    limiter.enabled = previous


def make_packing_list(
    name: str = "MyList",
    days: int = 10,
    gender: Gender = Gender.FEMALE,
    temperature: float = 12.0,
) -> PackingList:
    """Build an empty packing list for Warsaw, Poland."""
    return PackingList(
        id=uuid4(),
        name=name,
        days=TravelDays(days),
        gender=gender,
        temperature=Temperature(temperature),
        localization=Localization("Warsaw", "Poland"),
    )
