"""
Minimal rigid-body substrate for circular bodies.

The game logic only talks to the `RigidBody2D` / `PhysicsWorld` protocols, so
tests can swap `KinematicWorld` for any fake that moves bodies around.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Protocol, runtime_checkable

from mini_arcade_core.spaces.geometry.size import Size2D
from mini_arcade_core.spaces.geometry.transform import Transform2D
from mini_arcade_core.spaces.math.vec2 import Vec2
from mini_arcade_core.spaces.physics.kinematics2d import Kinematic2D


@runtime_checkable
class RigidBody2D(Protocol):
    """Contract for a circular body the game can read and steer."""

    radius: float
    static: bool

    @property
    def position(self) -> Vec2:
        """Current center of the body."""

    @property
    def velocity(self) -> Vec2:
        """Current velocity of the body, per tick."""

    def set_position(self, x: float, y: float):
        """Teleport the body."""

    def set_velocity(self, vx: float, vy: float):
        """Overwrite the body velocity."""


@runtime_checkable
class PhysicsWorld(Protocol):
    """Contract for the world that owns and integrates bodies."""

    @property
    def bodies(self) -> tuple[RigidBody2D, ...]:
        """Registered bodies, in registration order."""

    def add(self, *bodies: RigidBody2D):
        """Register bodies."""

    def remove(self, body: RigidBody2D):
        """Unregister a body."""

    def clear(self):
        """Drop every registered body."""

    def step(self, dt: float):
        """Advance every dynamic body by `dt` ticks."""


@dataclass(eq=False)
class CircleBody:
    """
    Circular body backed by a `Transform2D` (center + bounding size) and a
    `Kinematic2D`.

    :ivar radius (float): Body radius.
    :ivar transform (Transform2D): Center and bounding box size.
    :ivar kinematic (Kinematic2D): Velocity and acceleration state.
    :ivar static (bool): Static bodies are never integrated by the world.
    """

    radius: float
    transform: Transform2D
    kinematic: Kinematic2D = field(default_factory=Kinematic2D)
    static: bool = False

    @classmethod
    def at(
        cls,
        x: float,
        y: float,
        radius: float,
        *,
        velocity: tuple[float, float] = (0.0, 0.0),
        static: bool = False,
    ) -> "CircleBody":
        """
        Build a body centered on (x, y).

        :param x: Center X.
        :type x: float
        :param y: Center Y.
        :type y: float
        :param radius: Body radius.
        :type radius: float
        :param velocity: Initial velocity.
        :type velocity: tuple[float, float]
        :param static: Whether the world should skip integrating it.
        :type static: bool
        :return: The new body.
        :rtype: CircleBody
        """
        diameter = int(round(radius * 2))
        return cls(
            radius=radius,
            transform=Transform2D(
                center=Vec2(float(x), float(y)),
                size=Size2D(diameter, diameter),
            ),
            kinematic=Kinematic2D(velocity=Vec2(*map(float, velocity))),
            static=static,
        )

    @property
    def position(self) -> Vec2:
        return Vec2(self.transform.center.x, self.transform.center.y)

    @property
    def velocity(self) -> Vec2:
        return Vec2(self.kinematic.velocity.x, self.kinematic.velocity.y)

    def set_position(self, x: float, y: float):
        self.transform.center.x = x
        self.transform.center.y = y

    def set_velocity(self, vx: float, vy: float):
        self.kinematic.velocity.x = vx
        self.kinematic.velocity.y = vy


@dataclass
class KinematicWorld:
    """
    Semi-implicit Euler world: air drag, then gravity, then position.

    :ivar gravity (float): Downward acceleration per tick squared.
    :ivar air_friction (float): Fraction of velocity lost per tick.
    """

    gravity: float = 0.0
    air_friction: float = 0.0
    _bodies: list[RigidBody2D] = field(default_factory=list)

    @property
    def bodies(self) -> tuple[RigidBody2D, ...]:
        return tuple(self._bodies)

    def add(self, *bodies: RigidBody2D):
        for body in bodies:
            if body not in self._bodies:
                self._bodies.append(body)

    def extend(self, bodies: Iterable[RigidBody2D]):
        """Register every body of an iterable."""
        self.add(*bodies)

    def remove(self, body: RigidBody2D):
        if body in self._bodies:
            self._bodies.remove(body)

    def clear(self):
        self._bodies.clear()

    def step(self, dt: float):
        damping = (1.0 - self.air_friction) ** dt
        for body in self._bodies:
            if body.static:
                continue
            # CircleBody steps through Kinematic2D, anything else through
            # the protocol setters
            kinematic = getattr(body, "kinematic", None)
            transform = getattr(body, "transform", None)
            if kinematic is not None and transform is not None:
                kinematic.velocity *= damping
                kinematic.accel = Vec2(0.0, self.gravity)
                kinematic.step(transform, dt)
                continue

            vel = body.velocity
            vx = vel.x * damping
            vy = vel.y * damping + self.gravity * dt
            pos = body.position
            body.set_velocity(vx, vy)
            body.set_position(pos.x + vx * dt, pos.y + vy * dt)
