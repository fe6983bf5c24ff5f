"""Pruebas del normalizador de series temporales.

Tests for the time-series normalizer.
"""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from tallywatch.core.errors import InsufficientDataError, OrderingAmbiguityError
from tallywatch.core.models import Snapshot
from tallywatch.core.normalize import find_duplicate_timestamps, normalize_timeseries

BASE_TIME = datetime(2020, 11, 4, 4, 0)


def _snap(minute: int, votes: int, trump: float = 0.5, biden: float = 0.48) -> Snapshot:
    return Snapshot(
        timestamp=BASE_TIME + timedelta(minutes=minute),
        total_votes=votes,
        vote_share_trump=trump,
        vote_share_biden=biden,
    )


def test_sorts_snapshots_chronologically() -> None:
    """Los snapshots desordenados se ordenan por timestamp.

    Unordered snapshots come back sorted by timestamp.
    """
    snapshots = [_snap(20, 300), _snap(0, 100), _snap(10, 200)]

    ordered = normalize_timeseries(snapshots)

    assert [s.total_votes for s in ordered] == [100, 200, 300]


def test_sorted_input_is_unchanged() -> None:
    snapshots = [_snap(0, 100), _snap(5, 150), _snap(9, 175)]

    once = normalize_timeseries(snapshots)

    assert once == snapshots
    assert normalize_timeseries(once) == once


def test_does_not_mutate_input() -> None:
    snapshots = [_snap(5, 150), _snap(0, 100)]

    normalize_timeseries(snapshots)

    assert [s.total_votes for s in snapshots] == [150, 100]


def test_single_snapshot_is_accepted() -> None:
    assert normalize_timeseries([_snap(0, 100)]) == [_snap(0, 100)]


def test_empty_input_raises() -> None:
    with pytest.raises(InsufficientDataError):
        normalize_timeseries([])


def test_duplicate_timestamps_keep_input_order() -> None:
    """Timestamps repetidos conservan el orden de entrada (orden estable).

    Duplicate timestamps keep their input order; the behavior is flagged, not
    part of the audited contract.
    """
    first = _snap(5, 111)
    second = _snap(5, 222)

    ordered = normalize_timeseries([second, _snap(0, 50), first])

    assert [s.total_votes for s in ordered] == [50, 222, 111]


def test_strict_mode_rejects_duplicate_timestamps() -> None:
    with pytest.raises(OrderingAmbiguityError) as excinfo:
        normalize_timeseries([_snap(5, 111), _snap(5, 222), _snap(0, 50)], strict=True)

    assert excinfo.value.timestamps == [BASE_TIME + timedelta(minutes=5)]


def test_find_duplicate_timestamps() -> None:
    snapshots = [_snap(9, 1), _snap(3, 2), _snap(9, 3), _snap(3, 4), _snap(1, 5)]

    assert find_duplicate_timestamps(snapshots) == [
        BASE_TIME + timedelta(minutes=3),
        BASE_TIME + timedelta(minutes=9),
    ]
