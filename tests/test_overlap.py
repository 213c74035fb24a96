"""
Tests for the sequence overlap module.
"""

import pytest

from arrkit.sequence import Overlap, find_overlap


class TestFindOverlap:
    def test_tail_matches_head(self):
        assert find_overlap([0, 1, 2, 3, 5, 6], [3, 5, 6, 7, 8, 9]) == Overlap(3, 6)

    def test_extra_element_breaks_the_run(self):
        """A trailing element after the run is a stopper."""
        assert find_overlap([0, 1, 2, 3, 5, 6, 0], [3, 5, 6, 7, 8, 9]) is None

    def test_rightmost_offset_wins(self):
        result = find_overlap([0, 1, 2, 0, 1, 2], [1, 2, 0])
        assert result == Overlap(start=4, end=6)

    def test_b_ends_first(self):
        assert find_overlap([1, 2, 3, 4], [2, 3]) == Overlap(1, 3)

    def test_rejected_offset_then_lower_match(self):
        assert find_overlap([1, 2, 3, 1, 5], [1, 2, 3]) == Overlap(0, 3)

    def test_single_element(self):
        assert find_overlap([4, 7, 4], [4]) == Overlap(2, 3)

    def test_no_common_values(self):
        assert find_overlap(["zero", "one", "two"], ["will", "not", "intersect"]) is None

    def test_strings(self):
        assert find_overlap("abcab", "ab") == Overlap(3, 5)

    def test_tuples(self):
        assert find_overlap((("a", 1), ("b", 2)), [("b", 2), ("c", 3)]) == Overlap(1, 2)

    @pytest.mark.parametrize("b", [[1], [1, 2], ["x"]])
    def test_empty_a(self, b):
        assert find_overlap([], b) is None

    def test_empty_b(self):
        assert find_overlap([1, 2, 3], []) is None

    def test_identical(self):
        assert find_overlap([1, 2, 3], [1, 2, 3]) == Overlap(0, 3)

    def test_result_fields(self):
        overlap = find_overlap([0, 1, 2, 3, 5, 6], [3, 5, 6, 7, 8, 9])
        assert overlap.start == 3
        assert overlap.end == 6
        assert overlap.length == 3
        assert tuple(overlap) == (3, 6)

    def test_inputs_untouched(self):
        a, b = [0, 1, 2], [2, 3]
        find_overlap(a, b)
        assert a == [0, 1, 2]
        assert b == [2, 3]
