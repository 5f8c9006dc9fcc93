"""
Single-slot mailbox between the hand tracker and the game loop.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from mini_arcade_core.scenes.sim_scene import BaseIntent
from mini_arcade_core.utils import logger

from pinch_bounce.entities.paddle import PointLike, is_finite_point


@dataclass(frozen=True)
class PoseSample(BaseIntent):
    """
    Fingertip positions of one detected hand, in field coordinates.

    :ivar thumb (tuple[float, float]): Thumb tip.
    :ivar index (tuple[float, float]): Index fingertip.
    """

    thumb: tuple[float, float]
    index: tuple[float, float]

    @classmethod
    def from_points(cls, points: Sequence[PointLike]) -> "PoseSample":
        """
        Build a sample from `[thumb, index, ...]`; extra points are ignored.

        :raises ValueError: If fewer than two points or a non-finite point
            is given.
        """
        if len(points) < 2:
            raise ValueError(f"need two points, got {len(points)}")
        thumb, index = points[0], points[1]
        if not (is_finite_point(thumb) and is_finite_point(index)):
            raise ValueError(f"non-finite pose sample: {thumb!r}, {index!r}")
        return cls(
            thumb=(float(thumb[0]), float(thumb[1])),
            index=(float(index[0]), float(index[1])),
        )


class PoseMailbox:
    """
    Holds only the latest pose. The tracker writes, the loop reads once per
    frame; newer posts supersede older ones, nothing is queued.

    Reading does not consume the slot: until the tracker posts again the loop
    keeps seeing the same sample, which re-applies the same pose.
    """

    def __init__(self):
        self._slot: Optional[PoseSample] = None
        self.posted = 0
        self.rejected = 0

    def post(self, points: Optional[Sequence[PointLike]]) -> bool:
        """
        Store a tracker result.

        An empty result (``None`` or fewer than two points) means "no hand"
        and clears the slot. A malformed or non-finite result is dropped and
        the slot keeps its previous sample.

        :param points: Thumb tip and index fingertip, in that order.
        :type points: Sequence[Sequence[float]] | None
        :return: False if the result was rejected.
        :rtype: bool
        """
        if points is None or len(points) < 2:
            self._slot = None
            self.posted += 1
            return True

        try:
            sample = PoseSample.from_points(points)
        except ValueError as exc:
            self.rejected += 1
            logger.warning(f"Dropping pose sample: {exc}")
            return False

        self._slot = sample
        self.posted += 1
        return True

    def latest(self) -> Optional[PoseSample]:
        """Snapshot of the latest pose, or None if no hand is tracked."""
        return self._slot

    def clear(self):
        """Forget the stored pose."""
        self._slot = None
