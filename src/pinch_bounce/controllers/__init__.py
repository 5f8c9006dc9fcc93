"""
Paddle controllers for Pinch Bounce.
"""

from __future__ import annotations

from .hand import HandPaddleController

__all__ = ["HandPaddleController"]
