"""
Session settings for Pinch Bounce.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from pinch_bounce.constants import (
    AIR_FRICTION,
    BALL_RADIUS,
    BALL_START_VELOCITY,
    BOUNCE_BOOST,
    BOUNCE_JITTER,
    CONTACT_MARGIN,
    CONTROL_POINT_RADIUS,
    GRAVITY,
    PADDLE_START_OFFSET,
    TIMESTEP,
    WINDOW_SIZE,
)


def _normalize_pair(
    value: Any, default: tuple[float, float]
) -> tuple[float, float]:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        return default
    try:
        return (float(value[0]), float(value[1]))
    except (TypeError, ValueError):
        return default


@dataclass(frozen=True)
class Field:
    """
    Play field bounds, (0, 0) .. (width, height).

    :ivar width (float): Field width.
    :ivar height (float): Field height.
    """

    width: float
    height: float

    @property
    def center(self) -> tuple[float, float]:
        """Center of the field."""
        return (self.width / 2, self.height / 2)


# Justification: flat bag of tunables, mirrors constants.py
# pylint: disable=too-many-instance-attributes
@dataclass(frozen=True)
class BounceSettings:
    """
    Tunables for one play session.

    :ivar width (float): Field width in pixels.
    :ivar height (float): Field height in pixels.
    :ivar ball_radius (float): Ball radius.
    :ivar ball_start_velocity (tuple[float, float]): Ball velocity after a reset.
    :ivar control_point_radius (float): Radius of each paddle control point.
    :ivar contact_margin (float): Extra thickness added to the paddle segment.
    :ivar paddle_start_offset (float): Horizontal offset of the default pose.
    :ivar bounce_jitter (tuple[float, float]): Range of the horizontal kick.
    :ivar bounce_boost (float): Vertical speed multiplier on a bounce.
    :ivar timestep (float): Physics step per frame, in ticks.
    :ivar gravity (float): Downward acceleration per tick squared.
    :ivar air_friction (float): Fraction of velocity lost per tick.
    """

    width: float = float(WINDOW_SIZE[0])
    height: float = float(WINDOW_SIZE[1])
    ball_radius: float = BALL_RADIUS
    ball_start_velocity: tuple[float, float] = BALL_START_VELOCITY
    control_point_radius: float = CONTROL_POINT_RADIUS
    contact_margin: float = CONTACT_MARGIN
    paddle_start_offset: float = PADDLE_START_OFFSET
    bounce_jitter: tuple[float, float] = BOUNCE_JITTER
    bounce_boost: float = BOUNCE_BOOST
    timestep: float = TIMESTEP
    gravity: float = GRAVITY
    air_friction: float = AIR_FRICTION

    def __post_init__(self):
        for name in (
            "contact_margin",
            "paddle_start_offset",
            "gravity",
            "air_friction",
        ):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite: {value!r}")
        for name in ("ball_start_velocity", "bounce_jitter"):
            pair = getattr(self, name)
            if not all(math.isfinite(value) for value in pair):
                raise ValueError(f"{name} must be finite: {pair!r}")
        for name in (
            "width",
            "height",
            "ball_radius",
            "control_point_radius",
            "bounce_boost",
            "timestep",
        ):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"{name} must be a positive number: {value!r}")
        if self.contact_margin < 0:
            raise ValueError(
                f"contact_margin must not be negative: {self.contact_margin!r}"
            )
        low, high = self.bounce_jitter
        if low > high:
            raise ValueError(f"bounce_jitter is inverted: {self.bounce_jitter!r}")
        if not 0.0 <= self.air_friction < 1.0:
            raise ValueError(
                f"air_friction must be in [0, 1): {self.air_friction!r}"
            )

    @property
    def field(self) -> Field:
        """Play field for this session."""
        return Field(self.width, self.height)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "BounceSettings":
        """
        Construct settings from a dict, typically parsed from a config file.
        Unknown keys are ignored, missing keys fall back to the defaults.

        :param data: The input data to parse.
        :type data: dict or None
        :return: A BounceSettings instance populated with the parsed data.
        :rtype: BounceSettings
        :raises ValueError: If a parsed value is out of range.
        """
        if not isinstance(data, dict):
            return cls()
        defaults = cls()
        return cls(
            width=float(data.get("width", defaults.width)),
            height=float(data.get("height", defaults.height)),
            ball_radius=float(data.get("ball_radius", defaults.ball_radius)),
            ball_start_velocity=_normalize_pair(
                data.get("ball_start_velocity"), defaults.ball_start_velocity
            ),
            control_point_radius=float(
                data.get("control_point_radius", defaults.control_point_radius)
            ),
            contact_margin=float(
                data.get("contact_margin", defaults.contact_margin)
            ),
            paddle_start_offset=float(
                data.get("paddle_start_offset", defaults.paddle_start_offset)
            ),
            bounce_jitter=_normalize_pair(
                data.get("bounce_jitter"), defaults.bounce_jitter
            ),
            bounce_boost=float(data.get("bounce_boost", defaults.bounce_boost)),
            timestep=float(data.get("timestep", defaults.timestep)),
            gravity=float(data.get("gravity", defaults.gravity)),
            air_friction=float(data.get("air_friction", defaults.air_friction)),
        )


# pylint: enable=too-many-instance-attributes
