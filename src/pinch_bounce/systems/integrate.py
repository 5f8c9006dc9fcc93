"""
Physics step system.
"""

from __future__ import annotations

from dataclasses import dataclass

from pinch_bounce.models import BounceTickContext


@dataclass
class PhysicsStepSystem:
    """Advance the physics world by one timestep, unless the round reset."""

    name: str = "bounce_physics"
    order: int = 50

    def enabled(self, ctx: BounceTickContext) -> bool:
        """A reset ends the frame, the new round starts still."""
        return not ctx.reset

    def step(self, ctx: BounceTickContext):
        """Integrate ball (and any dynamic body) motion."""
        ctx.world.physics.step(ctx.dt)
