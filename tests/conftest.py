"""Shared fixtures for diagnostic tests."""

import pytest

from models import Car, ConditionState, Part, PartCategory


def make_parts(tires: int = 4, condition: ConditionState = ConditionState.GOOD):
    """One of each required part plus the given number of tires."""
    parts = [
        Part(PartCategory.ENGINE, condition),
        Part(PartCategory.ELECTRICAL, condition),
        Part(PartCategory.FUEL_FILTER, condition),
        Part(PartCategory.OIL_FILTER, condition),
    ]
    parts.extend(Part(PartCategory.TIRE, condition) for _ in range(tires))
    return parts


@pytest.fixture
def full_parts():
    return make_parts()


@pytest.fixture
def healthy_car(full_parts):
    return Car("2020", "Honda", "Civic", full_parts)
