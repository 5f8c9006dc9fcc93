"""
Pose system: first step of every frame.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pinch_bounce.controllers.hand import HandPaddleController
from pinch_bounce.models import BounceTickContext


@dataclass
class PaddlePoseSystem:
    """
    Move the paddle to the pose snapshotted for this tick.
    """

    controller: HandPaddleController = field(
        default_factory=HandPaddleController
    )
    name: str = "bounce_pose"
    order: int = 10

    def step(self, ctx: BounceTickContext):
        """Apply the tick's pose to the paddle."""
        ctx.pose_applied = self.controller.apply(ctx.world.paddle, ctx.intent)
