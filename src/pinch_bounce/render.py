"""
OpenCV renderer for Pinch Bounce: draws the game over the camera frame.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import cv2
import numpy as np
from mini_arcade_core.scenes.sim_scene import Drawable

from pinch_bounce.constants import FINGERTIP_RING_DIAMETER
from pinch_bounce.models import BounceTickContext

Color = tuple[int, int, int]

BLACK: Color = (0, 0, 0)
DARK: Color = (10, 10, 10)
GREY: Color = (80, 80, 80)
WHITE: Color = (255, 255, 255)


def _px(value: float) -> int:
    return int(round(value))


class DrawFingertips(Drawable[BounceTickContext]):
    """
    Rings on the tracked fingertips, only while a hand is tracked.

    The backend is the BGR canvas, drawn on in place.
    """

    def draw(self, backend: np.ndarray, ctx: BounceTickContext):
        if ctx.intent is None:
            return
        radius = FINGERTIP_RING_DIAMETER // 2
        for x, y in (ctx.intent.thumb, ctx.intent.index):
            cv2.circle(
                backend,
                (_px(x), _px(y)),
                radius,
                DARK,
                1,
                cv2.LINE_AA,
            )


class DrawPaddle(Drawable[BounceTickContext]):
    """
    Drawable to render both control points and the segment between them.
    """

    def draw(self, backend: np.ndarray, ctx: BounceTickContext):
        paddle = ctx.world.paddle
        for point in paddle.control_points:
            center = (_px(point.position.x), _px(point.position.y))
            radius = _px(point.radius)
            cv2.circle(backend, center, radius, GREY, -1, cv2.LINE_AA)
            cv2.circle(backend, center, radius, BLACK, 1, cv2.LINE_AA)

        start, end = paddle.segment()
        cv2.line(
            backend,
            (_px(start.x), _px(start.y)),
            (_px(end.x), _px(end.y)),
            BLACK,
            2,
            cv2.LINE_AA,
        )


class DrawBall(Drawable[BounceTickContext]):
    """
    Drawable to render the ball.
    """

    def draw(self, backend: np.ndarray, ctx: BounceTickContext):
        ball = ctx.world.ball
        pos = ball.position
        cv2.circle(
            backend,
            (_px(pos.x), _px(pos.y)),
            _px(ball.radius),
            BLACK,
            -1,
            cv2.LINE_AA,
        )


class DrawStats(Drawable[BounceTickContext]):
    """
    Drawable to render rally and round counters.
    """

    def draw(self, backend: np.ndarray, ctx: BounceTickContext):
        stats = ctx.world.stats
        text = (
            f"rally {stats.rally}  best {stats.best_rally}  "
            f"round {stats.rounds + 1}"
        )
        for color, thickness in ((WHITE, 3), (BLACK, 1)):
            cv2.putText(
                backend,
                text,
                (10, 24),
                cv2.FONT_HERSHEY_SIMPLEX,
                0.6,
                color,
                thickness,
                cv2.LINE_AA,
            )


@dataclass
class BounceRenderer:
    """
    Render the Pinch Bounce world over a camera frame.

    :ivar layers (list[Drawable]): Drawables, back to front.
    """

    layers: list[Drawable] = field(
        default_factory=lambda: [
            DrawFingertips(),
            DrawBall(),
            DrawPaddle(),
            DrawStats(),
        ]
    )

    def render(
        self, frame: np.ndarray | None, ctx: BounceTickContext
    ) -> np.ndarray:
        """
        Draw the tick onto a copy of `frame`, resized to the field. A white
        canvas is used when there is no camera frame.

        :param frame: Camera frame (BGR) or None.
        :type frame: np.ndarray | None
        :param ctx: Tick context to draw.
        :type ctx: BounceTickContext
        :return: The composed image.
        :rtype: np.ndarray
        """
        field_ = ctx.world.field
        size = (_px(field_.width), _px(field_.height))
        if frame is None:
            canvas = np.full((size[1], size[0], 3), 255, dtype=np.uint8)
        else:
            canvas = cv2.resize(frame, size)

        for layer in self.layers:
            layer.draw(canvas, ctx)
        return canvas
