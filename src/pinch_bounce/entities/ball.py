"""
Ball entity for Pinch Bounce.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.spaces.d2.physics2d import Velocity2D
from mini_arcade_core.spaces.math.vec2 import Vec2

from pinch_bounce.physics.world import CircleBody, RigidBody2D


@dataclass(eq=False)
class Ball:
    """
    Ball entity. Position and velocity live on the physics body.

    :ivar body (RigidBody2D): Physics body backing the ball.
    """

    body: RigidBody2D

    @classmethod
    def spawn(
        cls,
        x: float,
        y: float,
        radius: float,
        velocity: tuple[float, float] = (0.0, 0.0),
    ) -> "Ball":
        """
        Create a ball centered on (x, y).

        :param x: Center X.
        :type x: float
        :param y: Center Y.
        :type y: float
        :param radius: Ball radius.
        :type radius: float
        :param velocity: Initial velocity.
        :type velocity: tuple[float, float]
        :return: The new ball.
        :rtype: Ball
        """
        return cls(CircleBody.at(x, y, radius, velocity=velocity))

    @property
    def radius(self) -> float:
        """Ball radius."""
        return self.body.radius

    @property
    def position(self) -> Vec2:
        """Center of the ball (a copy)."""
        return self.body.position

    @property
    def velocity(self) -> Velocity2D:
        """Velocity of the ball (a copy)."""
        vel = self.body.velocity
        return Velocity2D(vel.x, vel.y)

    def set_velocity(self, velocity: Velocity2D):
        """Overwrite the ball velocity."""
        self.body.set_velocity(velocity.vx, velocity.vy)

    def set_position(self, x: float, y: float):
        """Teleport the ball."""
        self.body.set_position(x, y)
