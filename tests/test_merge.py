# -*-  coding: utf-8 -*-
"""
Set of test for the column merge.

Columns are written from index 0 to the wall at the last index.
"""
from unittest import TestCase, main

import numpy as np

from puzzle2048.core.gameboard import ColumnResult, Slot, merge_column


class TestMergeColumn(TestCase):
    """Slide and merge of a single column toward its last index."""

    def test_triple_merge(self):
        """The two tiles closest to the wall merge, the trailing one only slides."""
        result = merge_column([2, 2, 2, 4])
        self.assertEqual(result, ColumnResult((0, 2, 4, 4), True, 4))

    def test_simple_slide(self):
        """A lone tile slides up to the wall without scoring."""
        result = merge_column([0, 2, 0, 0])
        self.assertEqual(result, ColumnResult((0, 0, 0, 2), True, 0))

    def test_empty_column(self):
        """An empty column does not change."""
        self.assertEqual(merge_column([0, 0, 0, 0]), ColumnResult((0, 0, 0, 0), False, 0))

    def test_single_tile_at_wall(self):
        """A tile already against the wall stays put."""
        self.assertEqual(merge_column([0, 0, 0, 8]), ColumnResult((0, 0, 0, 8), False, 0))

    def test_packed_without_pairs(self):
        """A packed column with no equal neighbours does not change."""
        self.assertEqual(merge_column([2, 4, 2, 4]), ColumnResult((2, 4, 2, 4), False, 0))

    def test_two_pairs(self):
        """Four equal tiles merge into two."""
        self.assertEqual(merge_column([2, 2, 2, 2]), ColumnResult((0, 0, 4, 4), True, 8))

    def test_merge_across_gap(self):
        """Equal tiles separated by empty slots merge."""
        self.assertEqual(merge_column([4, 0, 4, 0]), ColumnResult((0, 0, 0, 8), True, 8))

    def test_merged_tile_does_not_merge_again(self):
        """A tile created by a merge is not a merge partner on the same call."""
        # ##>: The two 4s make an 8 that must not absorb the trailing 8.
        self.assertEqual(merge_column([8, 4, 4, 8]), ColumnResult((0, 8, 8, 8), True, 8))
        # ##>: The two 2s make a 4 next to the original 4, which stays separate.
        self.assertEqual(merge_column([2, 2, 4, 0]), ColumnResult((0, 0, 4, 4), True, 4))

    def test_merge_after_slide(self):
        """Tiles slide past an empty slot and then merge with what is ahead."""
        self.assertEqual(merge_column([2, 0, 2, 4]), ColumnResult((0, 0, 4, 4), True, 4))
        self.assertEqual(merge_column([4, 4, 0, 8]), ColumnResult((0, 0, 8, 8), True, 8))

    def test_column_length(self):
        """Columns of any length are supported."""
        self.assertEqual(merge_column([2]), ColumnResult((2,), False, 0))
        self.assertEqual(merge_column([2, 2]), ColumnResult((0, 4), True, 4))
        self.assertEqual(merge_column([2, 0, 2, 2, 0, 4]), ColumnResult((0, 0, 0, 2, 4, 4), True, 4))

    def test_input_is_not_modified(self):
        """The column passed in is left untouched."""
        column = np.array([2, 2, 0, 0])
        merge_column(column)
        np.testing.assert_array_equal(column, np.array([2, 2, 0, 0]))

    def test_slot_states(self):
        """Slots are empty, occupied or merged."""
        self.assertEqual({slot.name for slot in Slot}, {"EMPTY", "OCCUPIED", "MERGED"})


class TestMergeProperties(TestCase):
    """Invariants checked on random columns."""

    def setUp(self):
        self.generator = np.random.default_rng(42)

    def random_column(self, size: int) -> list[int]:
        values = self.generator.choice([0, 0, 2, 4, 8, 16], size=size)
        return [int(value) for value in values]

    def test_value_conservation(self):
        """Sliding and merging keep the sum of the column."""
        for _ in range(500):
            column = self.random_column(int(self.generator.integers(1, 7)))
            result = merge_column(column)
            self.assertEqual(sum(result.values), sum(column), column)

    def test_packed_toward_wall(self):
        """Afterwards no empty slot sits between a tile and the wall."""
        for _ in range(500):
            column = self.random_column(5)
            values = merge_column(column).values
            tiles = [value for value in values if value]
            self.assertEqual(values[len(values) - len(tiles) :], tuple(tiles), column)

    def test_score_and_tile_count(self):
        """Each merge removes one tile and scores the merged value."""
        for _ in range(500):
            column = self.random_column(5)
            result = merge_column(column)
            merges = sum(1 for value in column if value) - sum(1 for value in result.values if value)
            self.assertGreaterEqual(merges, 0)
            self.assertEqual(result.score == 0, merges == 0, column)
            self.assertLessEqual(merges, sum(1 for value in column if value) // 2)

    def test_changed_iff_different(self):
        """The changed flag is set exactly when the column differs."""
        for _ in range(500):
            column = self.random_column(4)
            result = merge_column(column)
            self.assertEqual(result.changed, result.values != tuple(column), column)

    def test_idempotent_without_pairs(self):
        """Merging a column that has nothing left to merge changes nothing."""
        for _ in range(200):
            column = self.random_column(4)
            once = merge_column(column).values
            values = [value for value in once if value]
            if all(a != b for a, b in zip(values, values[1:])):
                self.assertFalse(merge_column(once).changed, once)


if __name__ == "__main__":
    main()
