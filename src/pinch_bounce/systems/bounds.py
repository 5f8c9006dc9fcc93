"""
Keep the ball inside the left, right and top edges of the field.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.spaces.d2.physics2d import Velocity2D

from pinch_bounce.entities.ball import Ball
from pinch_bounce.models import BounceTickContext
from pinch_bounce.settings import Field


@dataclass
class BoundsGuard:
    """
    Point the ball velocity back into the field when it crosses an edge.

    Only velocity is corrected, the position is left alone, so the ball may
    overlap an edge for a frame. The bottom edge is open: falling through it
    ends the round.
    """

    name: str = "bounce_bounds"
    order: int = 30

    def clamp(self, ball: Ball, field: Field) -> bool:
        """
        Correct the ball velocity against the field edges.

        :param ball: The ball.
        :type ball: Ball
        :param field: Play field.
        :type field: Field
        :return: True if any velocity component was changed.
        :rtype: bool
        """
        pos = ball.position
        vel = ball.velocity
        r = ball.radius
        vx, vy = vel.vx, vel.vy

        if pos.x - r < 0:
            vx = abs(vx)
        elif pos.x + r > field.width:
            vx = -abs(vx)

        if pos.y - r < 0:
            vy = abs(vy)

        if (vx, vy) == (vel.vx, vel.vy):
            return False
        ball.set_velocity(Velocity2D(vx, vy))
        return True

    def step(self, ctx: BounceTickContext):
        """Clamp the ball for this tick."""
        ctx.clamped = self.clamp(ctx.world.ball, ctx.world.field)
