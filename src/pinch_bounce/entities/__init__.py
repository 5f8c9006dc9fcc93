"""
Entities package for Pinch Bounce.
This package contains all entity definitions used in the game.
"""

from __future__ import annotations

from .ball import Ball
from .paddle import ControlPoint, Paddle

__all__ = [
    "Ball",
    "ControlPoint",
    "Paddle",
]
