"""Tests for the B3/S23 rules and toroidal neighbor counting."""

import pytest
import numpy as np

from lifeterm.core.conway_rules import (BIRTH_SET, RULE_TABLE, SURVIVAL_SET, count_live_neighbors,
                                        neighbor_counts, next_generation, update_cell)


class TestUpdateCell:
    """Single-cell rule table."""

    @pytest.mark.parametrize("neighbors", range(9))
    def test_live_cell(self, neighbors):
        """Live cell survives only with 2 or 3 neighbors."""
        assert update_cell(True, neighbors) is (neighbors in (2, 3))

    @pytest.mark.parametrize("neighbors", range(9))
    def test_dead_cell(self, neighbors):
        """Dead cell is born only with exactly 3 neighbors."""
        assert update_cell(False, neighbors) is (neighbors == 3)

    def test_standard_rule_sets(self):
        assert SURVIVAL_SET == {2, 3}
        assert BIRTH_SET == {3}


class TestNeighborCounting:
    """Moore neighborhood counting with wrap-around."""

    def test_center_not_counted(self):
        state = np.zeros((5, 5), dtype=bool)
        state[2, 2] = True
        assert count_live_neighbors(state, 2, 2) == 0

    def test_all_eight_neighbors(self):
        state = np.ones((5, 5), dtype=bool)
        state[2, 2] = False
        assert count_live_neighbors(state, 2, 2) == 8

    def test_wraps_across_edges(self):
        """A cell on the left edge sees the right edge."""
        state = np.zeros((5, 5), dtype=bool)
        state[2, 4] = True
        assert count_live_neighbors(state, 2, 0) == 1
        assert count_live_neighbors(state, 1, 0) == 1
        assert count_live_neighbors(state, 3, 0) == 1

    def test_vectorized_matches_scalar(self):
        """neighbor_counts agrees with per-cell counting everywhere."""
        rng = np.random.default_rng(7)
        state = rng.random((9, 13)) < 0.4
        counts = neighbor_counts(state)

        for row in range(9):
            for col in range(13):
                assert counts[row, col] == count_live_neighbors(state, row, col)


class TestNextGeneration:
    """Whole-grid generation step."""

    def test_input_untouched(self):
        state = np.zeros((6, 6), dtype=bool)
        state[2, 1:4] = True
        before = state.copy()

        next_generation(state)

        assert np.array_equal(state, before)

    def test_blinker_rotates(self):
        state = np.zeros((5, 5), dtype=bool)
        state[2, 1:4] = True

        result = next_generation(state)

        expected = np.zeros((5, 5), dtype=bool)
        expected[1:4, 2] = True
        assert np.array_equal(result, expected)

    def test_birth_across_wrap(self):
        """Three live cells on the far edge give birth on the near edge."""
        state = np.zeros((6, 6), dtype=bool)
        state[1:4, 5] = True

        result = next_generation(state)

        # Vertical blinker on the right edge becomes horizontal, wrapping to col 0
        assert result[2, 4] and result[2, 5] and result[2, 0]
        assert result.sum() == 3

    def test_matches_cell_rule_everywhere(self):
        """Whole-grid step agrees with update_cell applied cell by cell."""
        rng = np.random.default_rng(11)
        state = rng.random((8, 10)) < 0.35

        result = next_generation(state)

        for row in range(8):
            for col in range(10):
                expected = update_cell(bool(state[row, col]),
                                       count_live_neighbors(state, row, col))
                assert result[row, col] == expected

    def test_rule_table_built_from_cell_rule(self):
        assert RULE_TABLE.shape == (2, 9)
        assert RULE_TABLE.dtype == bool
        assert list(np.flatnonzero(RULE_TABLE[0])) == [3]
        assert list(np.flatnonzero(RULE_TABLE[1])) == [2, 3]
