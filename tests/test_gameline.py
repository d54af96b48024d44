"""
Tests for the merge engine applied to a single line.
"""
from unittest import TestCase, main

import numpy as np

from mergegrid.core.gameline import EMPTY_CELL, merge_line


class TestMergeLine(TestCase):
    def test_merge_toward_end(self):
        """Pairs merge and tiles rest against the last cell."""
        result = merge_line(np.array([2, 2, 4, 0]))
        np.testing.assert_array_equal(result, np.array([0, 0, 4, 4]))

    def test_each_pair_merges_once(self):
        """A tile produced by a merge is not merged again in the same pass."""
        np.testing.assert_array_equal(merge_line(np.array([2, 2, 2, 2])), np.array([0, 0, 4, 4]))
        np.testing.assert_array_equal(merge_line(np.array([4, 4, 8, 0])), np.array([0, 0, 8, 8]))

    def test_merge_toward_start(self):
        """Tiles flow toward the first cell when requested."""
        result = merge_line(np.array([4, 0, 2, 2]), toward_start=True)
        np.testing.assert_array_equal(result, np.array([4, 4, 0, 0]))

        result = merge_line(np.array([2, 2, 2, 2]), toward_start=True)
        np.testing.assert_array_equal(result, np.array([4, 4, 0, 0]))

    def test_fold_starts_from_far_wall(self):
        """Odd runs merge from the side opposite to the flow end."""
        np.testing.assert_array_equal(merge_line(np.array([2, 2, 2])), np.array([0, 4, 2]))
        np.testing.assert_array_equal(merge_line(np.array([2, 2, 2]), toward_start=True), np.array([2, 4, 0]))

    def test_slide_without_merge(self):
        np.testing.assert_array_equal(merge_line(np.array([2, 0, 0, 0])), np.array([0, 0, 0, 2]))
        np.testing.assert_array_equal(merge_line(np.array([0, 8, 0, 4]), toward_start=True), np.array([8, 4, 0, 0]))

    def test_edge_cases(self):
        """Empty lines, all-empty lines and single tiles."""
        self.assertEqual(len(merge_line(np.array([], dtype=np.int64))), 0)
        np.testing.assert_array_equal(merge_line(np.zeros(5, dtype=np.int64)), np.zeros(5, dtype=np.int64))
        np.testing.assert_array_equal(merge_line(np.array([16])), np.array([16]))
        np.testing.assert_array_equal(merge_line(np.array([16]), toward_start=True), np.array([16]))

    def test_input_untouched(self):
        line = np.array([2, 2, 0, 4])
        merge_line(line)
        merge_line(line, toward_start=True)
        np.testing.assert_array_equal(line, np.array([2, 2, 0, 4]))

    def test_dtype_preserved(self):
        line = np.array([2, 2, 0, 0], dtype=np.int32)
        self.assertEqual(merge_line(line).dtype, np.int32)

    def test_length_and_sum_preserved(self):
        """Random lines keep their length and the sum of their values."""
        generator = np.random.default_rng(7)
        for _ in range(300):
            size = int(generator.integers(1, 7))
            line = generator.choice([EMPTY_CELL, 2, 4, 8, 16], size=size)
            for toward_start in (False, True):
                result = merge_line(line, toward_start=toward_start)
                self.assertEqual(len(result), size)
                self.assertEqual(result.sum(), line.sum())

    def test_collapsed_line_is_stable(self):
        """A line without gaps nor adjacent equal tiles is left as is."""
        for line in ([0, 0, 2, 4], [8, 4, 2, 16], [0, 2, 8, 2]):
            line = np.array(line)
            np.testing.assert_array_equal(merge_line(line), line)
            np.testing.assert_array_equal(merge_line(line[::-1], toward_start=True), line[::-1])

    def test_second_pass_on_collapsed_result(self):
        """Re-merging a result with no adjacent equal tiles changes nothing."""
        generator = np.random.default_rng(11)
        for _ in range(300):
            line = generator.choice([EMPTY_CELL, 2, 4, 8], size=5)
            result = merge_line(line)
            tiles = result[result != EMPTY_CELL]
            if np.any(tiles[:-1] == tiles[1:]):
                continue
            np.testing.assert_array_equal(merge_line(result), result)


if __name__ == "__main__":
    main()
