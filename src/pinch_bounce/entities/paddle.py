"""
Paddle entity for Pinch Bounce: a segment spanned by two control points.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from mini_arcade_core.spaces.math.vec2 import Vec2

from pinch_bounce.constants import (
    CONTACT_MARGIN,
    CONTROL_POINT_RADIUS,
    PADDLE_START_OFFSET,
)
from pinch_bounce.physics.world import CircleBody, RigidBody2D
from pinch_bounce.settings import Field

PointLike = Sequence[float]


def is_finite_point(point: Optional[PointLike]) -> bool:
    """
    Check that `point` is an (x, y) pair of finite numbers.

    :param point: Candidate point.
    :type point: Sequence[float] | None
    :return: True if the point can be applied to physics state.
    :rtype: bool
    """
    if point is None:
        return False
    try:
        x, y = point
        return math.isfinite(x) and math.isfinite(y)
    except (TypeError, ValueError, OverflowError):
        return False


@dataclass(eq=False)
class ControlPoint:
    """
    One tracked fingertip. Static body: the world never integrates it, its
    position only changes through pose samples.

    :ivar body (RigidBody2D): Physics body backing the control point.
    """

    body: RigidBody2D

    @classmethod
    def at(cls, x: float, y: float, radius: float) -> "ControlPoint":
        """Create a control point centered on (x, y)."""
        return cls(CircleBody.at(x, y, radius, static=True))

    @property
    def radius(self) -> float:
        """Control point radius."""
        return self.body.radius

    @property
    def position(self) -> Vec2:
        """Center of the control point (a copy)."""
        return self.body.position

    def move_to(self, x: float, y: float):
        """Move the control point."""
        self.body.set_position(float(x), float(y))


@dataclass(eq=False)
class Paddle:
    """
    Paddle entity: exactly two control points, thumb first.

    :ivar thumb (ControlPoint): Segment start (point0).
    :ivar index (ControlPoint): Segment end (point1).
    :ivar margin (float): Extra contact thickness around the segment.
    """

    thumb: ControlPoint
    index: ControlPoint
    margin: float = CONTACT_MARGIN

    @classmethod
    def create(
        cls,
        field: Field,
        *,
        radius: float = CONTROL_POINT_RADIUS,
        margin: float = CONTACT_MARGIN,
        offset: float = PADDLE_START_OFFSET,
    ) -> "Paddle":
        """
        Create a paddle in its default pose, centered on the field.

        :param field: Play field.
        :type field: Field
        :param radius: Control point radius.
        :type radius: float
        :param margin: Contact margin.
        :type margin: float
        :param offset: Horizontal offset of each point from the center.
        :type offset: float
        :return: The new paddle.
        :rtype: Paddle
        """
        cx, cy = field.center
        return cls(
            thumb=ControlPoint.at(cx - offset, cy, radius),
            index=ControlPoint.at(cx + offset, cy, radius),
            margin=margin,
        )

    @property
    def control_points(self) -> tuple[ControlPoint, ControlPoint]:
        """Both control points, thumb first."""
        return (self.thumb, self.index)

    @property
    def bodies(self) -> tuple[RigidBody2D, RigidBody2D]:
        """Physics bodies of both control points."""
        return (self.thumb.body, self.index.body)

    def set_control_points(
        self, p0: Optional[PointLike], p1: Optional[PointLike]
    ) -> bool:
        """
        Move both control points. Keeps the previous pose if either point is
        missing or not finite.

        :param p0: New thumb position.
        :type p0: Sequence[float] | None
        :param p1: New index position.
        :type p1: Sequence[float] | None
        :return: True if the pose was applied.
        :rtype: bool
        """
        if not (is_finite_point(p0) and is_finite_point(p1)):
            return False
        self.thumb.move_to(*p0)
        self.index.move_to(*p1)
        return True

    def segment(self) -> tuple[Vec2, Vec2]:
        """Segment from the thumb to the index fingertip."""
        return (self.thumb.position, self.index.position)

    def contact_radius(self) -> float:
        """Distance from the segment at which the ball counts as touching."""
        return self.thumb.radius + self.margin
