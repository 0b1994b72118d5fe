#!/usr/bin/env python3
"""
Unit tests for eikonal_fmm/utils/paths.py and eikonal_fmm/utils/validation.py

Tests path reconstruction and reachability analysis including:
- Backtracking predecessor chains
- Cycle detection
- Interior masks
- Reachable regions with obstacles and margins
"""

import pytest

import numpy as np

from eikonal_fmm.utils.exceptions import MarchingError, SeedOutOfBoundsError
from eikonal_fmm.utils.paths import backtrack_path
from eikonal_fmm.utils.validation import interior_mask, reachable_region

# =============================================================================
# Test backtrack_path
# =============================================================================


@pytest.mark.unit
def test_backtrack_follows_chain():
    """Test the path runs from target to seed."""
    predecessors = np.full((1, 4), -1, dtype=np.int64)
    predecessors[0, 1] = 0
    predecessors[0, 2] = 1
    predecessors[0, 3] = 2

    assert backtrack_path(predecessors, (0, 3)) == [(0, 3), (0, 2), (0, 1), (0, 0)]


@pytest.mark.unit
def test_backtrack_without_predecessor():
    """Test a seed gives a one-cell path."""
    predecessors = np.full((3, 3), -1, dtype=np.int64)
    assert backtrack_path(predecessors, (1, 1)) == [(1, 1)]


@pytest.mark.unit
def test_backtrack_detects_cycle():
    """Test cyclic links raise instead of looping."""
    predecessors = np.full((2,), -1, dtype=np.int64)
    predecessors[0] = 1
    predecessors[1] = 0

    with pytest.raises(MarchingError, match="PREDECESSOR_CYCLE"):
        backtrack_path(predecessors, (0,))


@pytest.mark.unit
def test_backtrack_rejects_outside_target():
    """Test a target outside the grid is rejected."""
    predecessors = np.full((3, 3), -1, dtype=np.int64)
    with pytest.raises(SeedOutOfBoundsError):
        backtrack_path(predecessors, (3, 0))


# =============================================================================
# Test reachability
# =============================================================================


@pytest.mark.unit
def test_interior_mask():
    """Test the margin band is excluded."""
    mask = interior_mask((4, 5), margin=1)

    assert mask.sum() == 2 * 3
    assert not mask[0].any()
    assert mask[1:3, 1:4].all()


@pytest.mark.unit
def test_reachable_region_open_grid():
    """Test an open grid is reachable up to the margin."""
    passable = np.ones((5, 5), dtype=bool)

    np.testing.assert_array_equal(reachable_region(passable, [(2, 2)], margin=0), passable)
    np.testing.assert_array_equal(reachable_region(passable, [(2, 2)], margin=1), interior_mask((5, 5), 1))


@pytest.mark.unit
def test_reachable_region_wall_blocks():
    """Test a full wall separates the two halves."""
    passable = np.ones((5, 5), dtype=bool)
    passable[2, :] = False

    region = reachable_region(passable, [(0, 0)], margin=0)

    assert region[:2].all()
    assert not region[2:].any()


@pytest.mark.unit
def test_reachable_region_diagonal_gap():
    """Test diagonal steps connect cells."""
    passable = np.array(
        [
            [True, False],
            [False, True],
        ]
    )
    region = reachable_region(passable, [(0, 0)], margin=0)
    np.testing.assert_array_equal(region, passable)


@pytest.mark.unit
def test_reachable_region_seed_in_margin_band():
    """Test a seed inside the margin band still reaches the interior."""
    passable = np.ones((5, 5), dtype=bool)
    region = reachable_region(passable, [(0, 2)], margin=1)

    assert region[0, 2]
    assert region[1:4, 1:4].all()
    assert not region[0, 0]
