"""
Round rules: the ball falling out of the bottom of the field resets the game.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.utils import logger

from pinch_bounce.entities.ball import Ball
from pinch_bounce.models import BounceTickContext, BounceWorld
from pinch_bounce.settings import Field


def ball_lost(ball: Ball, field: Field) -> bool:
    """Whether the ball is fully below the bottom edge."""
    return ball.position.y > field.height + ball.radius


@dataclass
class RoundController:
    """
    Reset ball, paddle and physics world when the ball is lost.
    """

    name: str = "bounce_rounds"
    order: int = 40

    def check_and_maybe_reset(self, world: BounceWorld) -> bool:
        """
        Reset the world if the ball left through the bottom.

        :param world: World to check.
        :type world: BounceWorld
        :return: True if a reset happened.
        :rtype: bool
        """
        if not ball_lost(world.ball, world.field):
            return False

        rally = world.stats.rally
        world.reset()
        world.stats.record_round()
        logger.info(
            f"Ball lost after {rally} bounce(s), starting round "
            f"{world.stats.rounds + 1}"
        )
        return True

    def step(self, ctx: BounceTickContext):
        """Apply round rules for this tick."""
        ctx.reset = self.check_and_maybe_reset(ctx.world)
