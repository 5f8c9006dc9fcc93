"""
Shared fixtures for the Pinch Bounce tests.
"""

from __future__ import annotations

import random

import pytest

from pinch_bounce.entities import Ball, Paddle
from pinch_bounce.entities.paddle import ControlPoint
from pinch_bounce.loop import GameLoop
from pinch_bounce.settings import BounceSettings, Field


@pytest.fixture
def field() -> Field:
    return Field(640.0, 480.0)


@pytest.fixture
def settings() -> BounceSettings:
    return BounceSettings()


@pytest.fixture
def still_settings() -> BounceSettings:
    """Settings without gravity or drag, for exact position checks."""
    return BounceSettings(gravity=0.0, air_friction=0.0)


@pytest.fixture
def flat_paddle() -> Paddle:
    """Segment (0, 0) -> (100, 0) with a contact radius of 20."""
    return Paddle(
        thumb=ControlPoint.at(0.0, 0.0, 4.0),
        index=ControlPoint.at(100.0, 0.0, 4.0),
        margin=16.0,
    )


@pytest.fixture
def make_ball():
    def _make(x, y, vx=0.0, vy=0.0, radius=20.0):
        return Ball.spawn(x, y, radius, velocity=(vx, vy))

    return _make


@pytest.fixture
def game(still_settings) -> GameLoop:
    loop = GameLoop(rng=random.Random(1234))
    loop.initialize(still_settings)
    return loop
