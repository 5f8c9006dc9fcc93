"""
Per-frame systems of the Pinch Bounce game loop, in execution order.
"""

from __future__ import annotations

from .bounds import BoundsGuard
from .collision import CollisionResolver, touches_segment
from .integrate import PhysicsStepSystem
from .pose import PaddlePoseSystem
from .rounds import RoundController, ball_lost

__all__ = [
    "BoundsGuard",
    "CollisionResolver",
    "PaddlePoseSystem",
    "PhysicsStepSystem",
    "RoundController",
    "ball_lost",
    "touches_segment",
]
