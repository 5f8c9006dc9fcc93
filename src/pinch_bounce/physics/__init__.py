"""
Physics substrate used by the Pinch Bounce game loop.
"""

from __future__ import annotations

from .world import CircleBody, KinematicWorld, PhysicsWorld, RigidBody2D

__all__ = [
    "CircleBody",
    "KinematicWorld",
    "PhysicsWorld",
    "RigidBody2D",
]
