from __future__ import annotations

import math
import random

import pytest

from pinch_bounce.loop import GameLoop
from pinch_bounce.settings import BounceSettings, Field


def _segment(game):
    start, end = game.paddle.segment()
    return (start.x, start.y, end.x, end.y)


def test_update_requires_initialize():
    with pytest.raises(RuntimeError):
        GameLoop().update()


def test_initialize_with_field_uses_default_tunables():
    game = GameLoop()
    world = game.initialize(Field(800.0, 600.0))

    assert world.field == Field(800.0, 600.0)
    assert game.ball.radius == BounceSettings().ball_radius
    pos = game.ball.position
    assert (pos.x, pos.y) == (400.0, 300.0)


def test_systems_run_in_frame_order(game):
    names = [system.name for system in game.systems.systems]

    assert names == [
        "bounce_pose",
        "bounce_collision",
        "bounce_bounds",
        "bounce_rounds",
        "bounce_physics",
    ]


def test_pose_sample_moves_paddle_on_next_update(game):
    game.on_pose_sample([(100, 200), (180, 210)])

    assert _segment(game) == (270.0, 240.0, 370.0, 240.0)

    ctx = game.update()

    assert ctx.pose_applied
    assert _segment(game) == (100.0, 200.0, 180.0, 210.0)


def test_paddle_freezes_without_hand(game):
    game.on_pose_sample([(100, 200), (180, 210)])
    game.update()
    frozen = _segment(game)

    game.on_pose_sample([])
    for _ in range(30):
        ctx = game.update()
        assert not ctx.pose_applied
        assert _segment(game) == frozen


def test_paddle_freezes_when_tracker_is_silent(game):
    game.on_pose_sample(None)
    initial = _segment(game)

    for _ in range(10):
        game.update()

    assert _segment(game) == initial


def test_invalid_sample_is_not_applied(game):
    game.on_pose_sample([(100, 200), (180, 210)])
    game.update()

    assert not game.on_pose_sample([(math.nan, 1.0), (2.0, 3.0)])
    game.update()

    assert _segment(game) == (100.0, 200.0, 180.0, 210.0)
    assert all(math.isfinite(v) for v in _segment(game))


def test_pose_posted_after_update_waits_for_next_frame(game):
    ctx = game.update()
    game.on_pose_sample([(10, 10), (20, 20)])

    assert ctx.intent is None
    assert _segment(game) == (270.0, 240.0, 370.0, 240.0)


def test_bounce_flows_through_update(game):
    game.on_pose_sample([(220, 250), (420, 250)])
    game.ball.body.set_velocity(1.0, 5.0)

    ctx = game.update()

    assert ctx.bounced
    assert game.ball.velocity.vy == pytest.approx(-6.0)
    assert game.stats.bounces == 1
    assert game.stats.rally == 1


def test_ball_integrates_once_per_frame(game):
    game.on_pose_sample([(0, 470), (10, 470)])
    game.ball.body.set_velocity(2.0, -3.0)

    game.update()

    pos = game.ball.position
    assert (pos.x, pos.y) == (322.0, 237.0)


def test_reset_skips_physics_step_and_happens_once(game):
    field = game.field
    game.ball.set_position(100, field.height + game.ball.radius + 1)
    game.ball.body.set_velocity(0.0, 5.0)

    ctx = game.update()

    assert ctx.reset
    pos = game.ball.position
    assert (pos.x, pos.y) == (field.width / 2, field.height / 2)
    assert _segment(game) == (270.0, 240.0, 370.0, 240.0)

    resets = [game.update().reset for _ in range(20)]
    assert not any(resets)
    assert game.stats.rounds == 1


def test_last_pose_is_reapplied_after_reset(game):
    game.on_pose_sample([(50, 400), (150, 400)])
    game.ball.set_position(600, 10_000)

    game.update()
    assert _segment(game) == (270.0, 240.0, 370.0, 240.0)

    game.update()
    assert _segment(game) == (50.0, 400.0, 150.0, 400.0)


def test_falling_ball_is_lost_exactly_once():
    game = GameLoop(rng=random.Random(0))
    game.initialize(BounceSettings(gravity=0.5, air_friction=0.0))
    game.on_pose_sample([(0, 0), (1, 0)])

    resets = sum(game.update().reset for _ in range(60))

    assert resets == 1
    assert game.stats.rounds == 1


def test_reinitialize_starts_fresh_session(game):
    game.on_pose_sample([(1, 1), (2, 2)])
    game.update()

    game.initialize(BounceSettings())

    assert game.frame == 0
    assert game.mailbox.latest() is None
    assert game.stats.bounces == 0
