from __future__ import annotations

import pytest

from mini_arcade_core.spaces.math.vec2 import Vec2

from pinch_bounce.controllers import HandPaddleController
from pinch_bounce.entities import Paddle
from pinch_bounce.physics import CircleBody, KinematicWorld, RigidBody2D
from pinch_bounce.tracking import PoseSample


class PlainBody:
    """Body that only implements the protocol."""

    def __init__(self, x, y, vx, vy):
        self.radius = 1.0
        self.static = False
        self._pos = (x, y)
        self._vel = (vx, vy)

    @property
    def position(self):
        return Vec2(*self._pos)

    @property
    def velocity(self):
        return Vec2(*self._vel)

    def set_position(self, x, y):
        self._pos = (x, y)

    def set_velocity(self, vx, vy):
        self._vel = (vx, vy)


def test_circle_body_satisfies_protocol():
    assert isinstance(CircleBody.at(0, 0, 5.0), RigidBody2D)


def test_static_bodies_are_not_integrated():
    world = KinematicWorld(gravity=1.0)
    body = CircleBody.at(5, 5, 2.0, velocity=(3.0, 3.0), static=True)
    world.add(body)

    world.step(1.0)

    assert (body.position.x, body.position.y) == (5.0, 5.0)


def test_gravity_is_applied_before_moving():
    world = KinematicWorld(gravity=0.5)
    body = CircleBody.at(0, 0, 2.0, velocity=(1.0, 0.0))
    world.add(body)

    world.step(1.0)
    world.step(1.0)

    assert (body.velocity.x, body.velocity.y) == (1.0, 1.0)
    assert (body.position.x, body.position.y) == (2.0, 1.5)


def test_air_friction_damps_velocity():
    world = KinematicWorld(air_friction=0.5)
    body = CircleBody.at(0, 0, 2.0, velocity=(4.0, -8.0))
    world.add(body)

    world.step(1.0)

    assert (body.velocity.x, body.velocity.y) == (2.0, -4.0)


def test_protocol_only_bodies_are_integrated():
    world = KinematicWorld(gravity=1.0)
    body = PlainBody(0.0, 0.0, 2.0, 0.0)
    world.add(body)

    world.step(1.0)

    assert (body.position.x, body.position.y) == (2.0, 1.0)


def test_add_is_idempotent_and_clear_empties():
    world = KinematicWorld()
    body = CircleBody.at(0, 0, 1.0)

    world.add(body, body)
    assert world.bodies == (body,)

    world.remove(body)
    assert world.bodies == ()

    world.extend([body])
    world.clear()
    assert world.bodies == ()


def test_hand_controller_tracks_hand_state(field):
    paddle = Paddle.create(field)
    controller = HandPaddleController()

    assert not controller.apply(paddle, None)
    assert controller.frames_without_hand == 1

    sample = PoseSample(thumb=(1.0, 2.0), index=(3.0, 4.0))
    assert controller.apply(paddle, sample)
    assert controller.tracking
    assert controller.frames_without_hand == 0

    assert not controller.apply(paddle, None)
    assert not controller.tracking
    start, _ = paddle.segment()
    assert (start.x, start.y) == pytest.approx((1.0, 2.0))
