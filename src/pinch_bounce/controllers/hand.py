"""
Hand paddle controller for Pinch Bounce.
"""

from __future__ import annotations

from typing import Optional

from mini_arcade_core.utils import logger

from pinch_bounce.entities import Paddle
from pinch_bounce.tracking.mailbox import PoseSample


class HandPaddleController:
    """
    Moves the paddle onto the tracked thumb and index fingertips.

    - With a pose: both control points jump to the fingertips.
    - Without one: the paddle keeps its last pose.
    """

    def __init__(self):
        self.tracking = False
        self.frames_without_hand = 0

    def apply(self, paddle: Paddle, sample: Optional[PoseSample]) -> bool:
        """
        Apply a pose sample to the paddle.

        :param paddle: The paddle to move.
        :type paddle: Paddle
        :param sample: Pose for this frame, None when no hand is tracked.
        :type sample: PoseSample | None
        :return: True if the paddle moved to the sample.
        :rtype: bool
        """
        applied = sample is not None and paddle.set_control_points(
            sample.thumb, sample.index
        )

        if applied:
            if not self.tracking:
                logger.info(
                    f"Hand tracked after {self.frames_without_hand} frame(s)"
                )
            self.tracking = True
            self.frames_without_hand = 0
            return True

        if self.tracking:
            logger.info("Hand lost, paddle frozen")
        self.tracking = False
        self.frames_without_hand += 1
        return False
