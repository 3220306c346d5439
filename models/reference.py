"""Reference bill of materials for a complete car."""

from types import MappingProxyType
from typing import Mapping

from .part import PartCategory

# Read-only. Iteration order is the reporting order for missing parts.
REQUIRED_PARTS: Mapping[PartCategory, int] = MappingProxyType(
    {
        PartCategory.ENGINE: 1,
        PartCategory.ELECTRICAL: 1,
        PartCategory.FUEL_FILTER: 1,
        PartCategory.OIL_FILTER: 1,
        PartCategory.TIRE: 4,
    }
)


def required_count(category: PartCategory) -> int:
    """Number of parts of this category a car needs (0 if not required)."""
    return REQUIRED_PARTS.get(category, 0)
