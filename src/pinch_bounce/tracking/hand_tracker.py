"""
MediaPipe hand tracker feeding thumb and index fingertips to the game.
"""

from __future__ import annotations

from typing import Callable

import cv2
import mediapipe as mp
import numpy as np
from mini_arcade_core.utils import logger

from pinch_bounce.constants import INDEX_FINGER_TIP, THUMB_TIP

PoseCallback = Callable[[list[tuple[float, float]]], object]


class HandTracker:
    """
    MediaPipe Hands wrapper tracking a single hand.

    `detect()` returns the thumb tip and index fingertip in pixel coordinates
    of the frame it was given, or an empty list when no hand is found.
    """

    def __init__(
        self,
        *,
        min_detection_confidence: float = 0.6,
        min_tracking_confidence: float = 0.5,
        model_complexity: int = 0,
    ):
        self._min_detect_conf = min_detection_confidence
        self._min_track_conf = min_tracking_confidence
        self._model_complexity = model_complexity
        self._mp_hands = mp.solutions.hands
        self._hands = None

    def initialize(self):
        """Create the MediaPipe Hands solution."""
        self._hands = self._mp_hands.Hands(
            static_image_mode=False,
            model_complexity=self._model_complexity,
            max_num_hands=1,
            min_detection_confidence=self._min_detect_conf,
            min_tracking_confidence=self._min_track_conf,
        )
        logger.info(
            f"MediaPipe Hands initialized (complexity={self._model_complexity}, "
            f"detect_conf={self._min_detect_conf:.2f}, "
            f"track_conf={self._min_track_conf:.2f})"
        )

    def detect(self, bgr_frame: np.ndarray) -> list[tuple[float, float]]:
        """
        Find the fingertips of the first detected hand.

        :param bgr_frame: Camera frame, BGR as read by OpenCV.
        :type bgr_frame: np.ndarray
        :return: ``[thumb, index]`` in pixels, or ``[]``.
        :rtype: list[tuple[float, float]]
        """
        if self._hands is None:
            self.initialize()

        height, width = bgr_frame.shape[:2]
        rgb = cv2.cvtColor(bgr_frame, cv2.COLOR_BGR2RGB)
        rgb.flags.writeable = False
        results = self._hands.process(rgb)

        if not results or not results.multi_hand_landmarks:
            return []

        landmarks = results.multi_hand_landmarks[0].landmark
        return [
            (landmarks[tip].x * width, landmarks[tip].y * height)
            for tip in (THUMB_TIP, INDEX_FINGER_TIP)
        ]

    def detect_into(
        self, bgr_frame: np.ndarray, callback: PoseCallback
    ) -> list[tuple[float, float]]:
        """Run `detect()` and hand the result to `callback`."""
        points = self.detect(bgr_frame)
        callback(points)
        return points

    def close(self):
        """Release MediaPipe resources."""
        if self._hands is not None:
            self._hands.close()
            self._hands = None
            logger.info("MediaPipe Hands closed")

    def __enter__(self):
        self.initialize()
        return self

    def __exit__(self, *args):
        self.close()
