from __future__ import annotations

import dataclasses
import math

import pytest

from pinch_bounce.tracking import PoseMailbox, PoseSample


def test_latest_sample_supersedes_older_ones():
    mailbox = PoseMailbox()

    mailbox.post([(1, 2), (3, 4)])
    mailbox.post([(5, 6), (7, 8)])

    assert mailbox.latest() == PoseSample(thumb=(5.0, 6.0), index=(7.0, 8.0))


def test_reading_does_not_consume():
    mailbox = PoseMailbox()
    mailbox.post([(1, 2), (3, 4)])

    assert mailbox.latest() is mailbox.latest()


@pytest.mark.parametrize("points", [None, [], [(1, 2)]])
def test_empty_result_means_no_hand(points):
    mailbox = PoseMailbox()
    mailbox.post([(1, 2), (3, 4)])

    assert mailbox.post(points)

    assert mailbox.latest() is None


@pytest.mark.parametrize(
    "points",
    [
        [(math.nan, 2), (3, 4)],
        [(1, 2), (3, math.inf)],
        [(1, 2, 3), (3, 4)],
        [("x", 2), (3, 4)],
        [(10**400, 0), (1, 1)],
    ],
)
def test_malformed_result_is_dropped(points):
    mailbox = PoseMailbox()
    mailbox.post([(1, 2), (3, 4)])
    kept = mailbox.latest()

    assert not mailbox.post(points)

    assert mailbox.latest() is kept
    assert mailbox.rejected == 1


def test_extra_points_are_ignored():
    sample = PoseSample.from_points([(1, 2), (3, 4), (5, 6)])

    assert sample == PoseSample(thumb=(1.0, 2.0), index=(3.0, 4.0))


def test_sample_is_immutable():
    sample = PoseSample.from_points([(1, 2), (3, 4)])

    with pytest.raises(dataclasses.FrozenInstanceError):
        sample.thumb = (0.0, 0.0)


def test_from_points_needs_two_points():
    with pytest.raises(ValueError):
        PoseSample.from_points([(1, 2)])


def test_clear():
    mailbox = PoseMailbox()
    mailbox.post([(1, 2), (3, 4)])

    mailbox.clear()

    assert mailbox.latest() is None
