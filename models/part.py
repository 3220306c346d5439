"""Part, category and condition types."""

from enum import Enum


class PartCategory(Enum):
    """Kinds of parts a car is built from."""

    ENGINE = "ENGINE"
    ELECTRICAL = "ELECTRICAL"
    FUEL_FILTER = "FUEL_FILTER"
    OIL_FILTER = "OIL_FILTER"
    TIRE = "TIRE"

    def __str__(self) -> str:
        return self.value


class ConditionState(Enum):
    """Wear level of a part."""

    NEW = "NEW"
    GOOD = "GOOD"
    WORN = "WORN"
    DAMAGED = "DAMAGED"
    RUSTED = "RUSTED"
    BROKEN = "BROKEN"
    SCRATCHED = "SCRATCHED"
    FLAT = "FLAT"

    def __str__(self) -> str:
        return self.value


# Anything outside this set is damaged.
WORKING_CONDITIONS = frozenset(
    {ConditionState.NEW, ConditionState.GOOD, ConditionState.WORN}
)


def is_working(condition: ConditionState) -> bool:
    """Check if a part in this condition still counts as working."""
    return condition in WORKING_CONDITIONS


class Part:
    """A single installed part."""

    def __init__(self, category: PartCategory, condition: ConditionState):
        self.category = category
        self.condition = condition

    @property
    def is_in_working_condition(self) -> bool:
        return is_working(self.condition)

    def __eq__(self, other):
        if not isinstance(other, Part):
            return NotImplemented
        return (self.category, self.condition) == (other.category, other.condition)

    def __hash__(self):
        return hash((self.category, self.condition))

    def __repr__(self) -> str:
        return f"Part({self.category.value}, {self.condition.value})"
