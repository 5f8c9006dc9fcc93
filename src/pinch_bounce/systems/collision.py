"""
Ball vs paddle collision: segment proximity test and bounce response.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

from mini_arcade_core.spaces.d2.physics2d import Velocity2D
from mini_arcade_core.utils import logger

from pinch_bounce.constants import BOUNCE_BOOST, BOUNCE_JITTER
from pinch_bounce.entities.ball import Ball
from pinch_bounce.entities.paddle import Paddle
from pinch_bounce.models import BounceTickContext

DEGENERATE_LENGTH = 1e-9


def touches_segment(ball: Ball, paddle: Paddle) -> bool:
    """
    Check whether the ball center lies within the paddle contact radius of
    the segment, with its projection falling between the two endpoints.

    :param ball: The ball.
    :type ball: Ball
    :param paddle: The paddle.
    :type paddle: Paddle
    :return: True if the ball touches the paddle. Always False when both
        control points coincide.
    :rtype: bool
    """
    start, end = paddle.segment()
    pos = ball.position

    line_x, line_y = end.x - start.x, end.y - start.y
    ball_x, ball_y = pos.x - start.x, pos.y - start.y

    length = math.hypot(line_x, line_y)
    if length <= DEGENERATE_LENGTH:
        logger.debug("Control points coincide, skipping paddle collision")
        return False

    # scalar projection of the ball onto the line, in length units
    proj = (ball_x * line_x + ball_y * line_y) / length
    if not 0.0 <= proj <= length:
        return False

    px = start.x + (proj / length) * line_x
    py = start.y + (proj / length) * line_y
    return math.hypot(pos.x - px, pos.y - py) <= paddle.contact_radius()


@dataclass
class CollisionResolver:
    """
    Bounce the ball upward when it touches the paddle.

    The response is an arcade kick, not a reflection across the segment
    normal: the vertical speed always points up and grows by `boost`, and
    the horizontal speed gets a random nudge from `jitter`.
    """

    jitter: tuple[float, float] = BOUNCE_JITTER
    boost: float = BOUNCE_BOOST
    rng: random.Random = field(default_factory=random.Random)
    name: str = "bounce_collision"
    order: int = 20

    def test_and_resolve(self, ball: Ball, paddle: Paddle) -> bool:
        """
        Apply the bounce if the ball touches the paddle.

        :param ball: The ball.
        :type ball: Ball
        :param paddle: The paddle.
        :type paddle: Paddle
        :return: True if a bounce was applied.
        :rtype: bool
        """
        if not touches_segment(ball, paddle):
            return False

        vel = ball.velocity
        low, high = self.jitter
        new_vx = vel.vx + self.rng.uniform(low, high)
        new_vy = -abs(vel.vy) * self.boost
        ball.set_velocity(Velocity2D(new_vx, new_vy))
        logger.debug(
            f"Paddle bounce: ({vel.vx:.2f}, {vel.vy:.2f}) -> "
            f"({new_vx:.2f}, {new_vy:.2f})"
        )
        return True

    def step(self, ctx: BounceTickContext):
        """Resolve ball vs paddle for this tick."""
        world = ctx.world
        ctx.bounced = self.test_and_resolve(world.ball, world.paddle)
        if ctx.bounced:
            world.stats.record_bounce()
