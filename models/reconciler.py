"""Reconcile a parts inventory against the reference bill of materials."""

from collections import Counter
from typing import Dict, Iterable, Optional

from .errors import InvalidInput
from .part import Part, PartCategory
from .reference import REQUIRED_PARTS, required_count


def count_parts(inventory: Iterable[Part]) -> Counter:
    """Count parts by category."""
    return Counter(part.category for part in inventory)


def compute_missing_parts(
    inventory: Optional[Iterable[Part]],
) -> Dict[PartCategory, int]:
    """
    Map each under-supplied category to how many parts are missing.

    Only categories from REQUIRED_PARTS are considered, in table order.
    Satisfied or over-supplied categories get no entry, and parts of
    categories outside the table are ignored.
    """
    if inventory is None:
        raise InvalidInput("Parts inventory must not be None")

    actual = count_parts(inventory)
    missing = {}
    for category in REQUIRED_PARTS:
        shortfall = required_count(category) - actual[category]
        if shortfall > 0:
            missing[category] = shortfall
    return missing
