#!/usr/bin/env python3
"""Tests for reconciling a parts inventory against the reference."""

import pytest

from models import (
    ConditionState,
    InvalidInput,
    Part,
    PartCategory,
    REQUIRED_PARTS,
    compute_missing_parts,
    count_parts,
    required_count,
)
from conftest import make_parts


class TestReferenceBillOfMaterials:
    """Tests for REQUIRED_PARTS."""

    def test_required_counts(self):
        assert dict(REQUIRED_PARTS) == {
            PartCategory.ENGINE: 1,
            PartCategory.ELECTRICAL: 1,
            PartCategory.FUEL_FILTER: 1,
            PartCategory.OIL_FILTER: 1,
            PartCategory.TIRE: 4,
        }

    def test_read_only(self):
        with pytest.raises(TypeError):
            REQUIRED_PARTS[PartCategory.TIRE] = 5

    def test_required_count(self):
        assert required_count(PartCategory.TIRE) == 4
        assert required_count(PartCategory.ENGINE) == 1


class TestCountParts:
    def test_counts_by_category(self):
        counts = count_parts(make_parts(tires=3))
        assert counts[PartCategory.TIRE] == 3
        assert counts[PartCategory.ENGINE] == 1

    def test_missing_category_counts_zero(self):
        assert count_parts([])[PartCategory.TIRE] == 0


class TestComputeMissingParts:
    """Tests for compute_missing_parts."""

    def test_complete_inventory_has_nothing_missing(self):
        assert compute_missing_parts(make_parts()) == {}

    def test_three_tires_missing(self):
        """A car missing three of four tires reports only TIRE: 3."""
        assert compute_missing_parts(make_parts(tires=1)) == {PartCategory.TIRE: 3}

    def test_empty_inventory_misses_everything(self):
        assert compute_missing_parts([]) == dict(REQUIRED_PARTS)

    def test_oversupply_not_flagged(self):
        parts = make_parts(tires=6) + [Part(PartCategory.ENGINE, ConditionState.NEW)]
        assert compute_missing_parts(parts) == {}

    def test_condition_does_not_matter(self):
        """Damaged parts still count as present."""
        assert compute_missing_parts(make_parts(condition=ConditionState.BROKEN)) == {}

    def test_result_in_reference_order(self):
        parts = [Part(PartCategory.TIRE, ConditionState.GOOD)]
        assert list(compute_missing_parts(parts)) == [
            PartCategory.ENGINE,
            PartCategory.ELECTRICAL,
            PartCategory.FUEL_FILTER,
            PartCategory.OIL_FILTER,
            PartCategory.TIRE,
        ]

    def test_accepts_tuple(self):
        assert compute_missing_parts(tuple(make_parts(tires=2))) == {
            PartCategory.TIRE: 2
        }

    def test_none_raises(self):
        with pytest.raises(InvalidInput):
            compute_missing_parts(None)

    @pytest.mark.parametrize("tires", [0, 1, 2, 3, 4, 5])
    def test_no_entry_below_one_and_sum_matches_shortfall(self, tires):
        parts = make_parts(tires=tires)[1:]  # drop the engine too
        missing = compute_missing_parts(parts)
        counts = count_parts(parts)
        expected_total = sum(
            max(required - counts[category], 0)
            for category, required in REQUIRED_PARTS.items()
        )
        assert all(count > 0 for count in missing.values())
        assert sum(missing.values()) == expected_total
