"""
Pinch Bounce: bounce a ball off the line between two tracked fingertips.
"""

from __future__ import annotations

from .loop import GameLoop
from .settings import BounceSettings, Field

__all__ = [
    "BounceSettings",
    "Field",
    "GameLoop",
]
