"""Classify parts by condition."""

from typing import Iterable, List, Optional

from .part import Part


def find_damaged_parts(inventory: Optional[Iterable[Part]]) -> List[Part]:
    """Parts not in working condition, in inventory order."""
    if inventory is None:
        return []
    return [part for part in inventory if not part.is_in_working_condition]
