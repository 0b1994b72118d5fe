#!/usr/bin/env python3
"""
Unit tests for eikonal_fmm/alg/numerical/eikonal_solvers/trial_set.py

Tests the trial set (narrow band) including:
- Insert and extract-min ordering
- Deterministic tie breaking
- Reprioritize (decrease-key) semantics
- Lazy removal of invalidated entries
- Empty-set behaviour
"""

import pytest

from eikonal_fmm.alg.numerical.eikonal_solvers.trial_set import TrialSet

# =============================================================================
# Test insert / extract_min
# =============================================================================


@pytest.mark.unit
def test_empty_trial_set():
    """Test a new trial set is empty and falsy."""
    trial = TrialSet()
    assert len(trial) == 0
    assert not trial


@pytest.mark.unit
def test_extract_in_distance_order():
    """Test entries come out by increasing distance."""
    trial = TrialSet()
    trial.insert((0, 0), 3.0)
    trial.insert((0, 1), 1.0)
    trial.insert((0, 2), 2.0)

    assert [trial.extract_min()[1] for _ in range(3)] == [1.0, 2.0, 3.0]
    assert not trial


@pytest.mark.unit
def test_ties_broken_by_coordinates():
    """Test equal distances come out in coordinate order."""
    trial = TrialSet()
    trial.insert((2, 0), 1.0)
    trial.insert((0, 5), 1.0)
    trial.insert((1, 1), 1.0)

    assert [trial.extract_min()[0] for _ in range(3)] == [(0, 5), (1, 1), (2, 0)]


@pytest.mark.unit
def test_duplicate_insert_rejected():
    """Test a coordinate cannot be inserted twice."""
    trial = TrialSet()
    trial.insert((1, 1), 2.0)
    with pytest.raises(ValueError, match="reprioritize"):
        trial.insert((1, 1), 1.0)


@pytest.mark.unit
def test_extract_from_empty_raises():
    """Test extract and peek on an empty set raise IndexError."""
    trial = TrialSet()
    with pytest.raises(IndexError):
        trial.extract_min()
    with pytest.raises(IndexError):
        trial.peek_min()


@pytest.mark.unit
def test_peek_does_not_remove():
    """Test peek_min leaves the entry in place."""
    trial = TrialSet()
    trial.insert((3,), 0.5)

    assert trial.peek_min() == ((3,), 0.5)
    assert len(trial) == 1
    assert (3,) in trial


# =============================================================================
# Test reprioritize
# =============================================================================


@pytest.mark.unit
def test_reprioritize_moves_entry_forward():
    """Test a decreased entry is extracted before others."""
    trial = TrialSet()
    trial.insert((0, 0), 1.0)
    trial.insert((0, 1), 5.0)

    assert trial.reprioritize((0, 1), 5.0, 0.5)
    assert len(trial) == 2
    assert trial.distance_of((0, 1)) == 0.5
    assert trial.extract_min() == ((0, 1), 0.5)
    assert trial.extract_min() == ((0, 0), 1.0)


@pytest.mark.unit
def test_reprioritize_leaves_single_live_entry():
    """Test repeated reprioritize keeps one entry per coordinate."""
    trial = TrialSet()
    trial.insert((4,), 10.0)
    trial.reprioritize((4,), 10.0, 8.0)
    trial.reprioritize((4,), 8.0, 6.0)

    assert len(trial) == 1
    assert trial.extract_min() == ((4,), 6.0)
    assert not trial
    with pytest.raises(IndexError):
        trial.extract_min()


@pytest.mark.unit
def test_reprioritize_requires_matching_old_distance():
    """Test a stale old distance leaves the entry untouched."""
    trial = TrialSet()
    trial.insert((1, 2), 3.0)

    assert not trial.reprioritize((1, 2), 4.0, 1.0)
    assert trial.distance_of((1, 2)) == 3.0


@pytest.mark.unit
def test_reprioritize_missing_coordinate_is_noop():
    """Test reprioritizing an unknown coordinate does nothing."""
    trial = TrialSet()
    assert not trial.reprioritize((0, 0), 2.0, 1.0)
    assert len(trial) == 0


@pytest.mark.unit
def test_reprioritize_ignores_increase():
    """Test a larger new distance is not applied."""
    trial = TrialSet()
    trial.insert((0,), 1.0)

    assert not trial.reprioritize((0,), 1.0, 2.0)
    assert trial.distance_of((0,)) == 1.0


# =============================================================================
# Test bookkeeping
# =============================================================================


@pytest.mark.unit
def test_items_lists_live_entries():
    """Test items() reports the current distance of each coordinate."""
    trial = TrialSet()
    trial.insert((0,), 2.0)
    trial.insert((1,), 3.0)
    trial.reprioritize((1,), 3.0, 1.0)

    assert dict(trial.items()) == {(0,): 2.0, (1,): 1.0}


@pytest.mark.unit
def test_clear_empties_set():
    """Test clear() removes every entry."""
    trial = TrialSet()
    trial.insert((0,), 2.0)
    trial.insert((1,), 3.0)
    trial.clear()

    assert len(trial) == 0
    assert trial.distance_of((0,)) is None
    assert "size=0" in repr(trial)


# =============================================================================
# Test discard
# =============================================================================


@pytest.mark.unit
def test_discard_removes_entry():
    """Test a discarded coordinate is never extracted."""
    trial = TrialSet()
    trial.insert((0, 0), 1.0)
    trial.insert((0, 1), 2.0)

    assert trial.discard((0, 0))
    assert (0, 0) not in trial
    assert len(trial) == 1
    assert trial.extract_min() == ((0, 1), 2.0)
    assert not trial


@pytest.mark.unit
def test_discard_after_reprioritize():
    """Test discarding drops the live entry, not only the superseded one."""
    trial = TrialSet()
    trial.insert((3,), 5.0)
    trial.reprioritize((3,), 5.0, 2.0)

    assert trial.discard((3,))
    with pytest.raises(IndexError):
        trial.peek_min()


@pytest.mark.unit
def test_discard_missing_coordinate():
    """Test discarding an unknown coordinate returns False."""
    trial = TrialSet()
    assert not trial.discard((1, 1))
