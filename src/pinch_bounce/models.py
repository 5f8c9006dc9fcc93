"""
Pinch Bounce world model
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from pinch_bounce.entities.ball import Ball
from pinch_bounce.entities.paddle import Paddle
from pinch_bounce.physics.world import KinematicWorld, PhysicsWorld
from pinch_bounce.settings import BounceSettings, Field
from pinch_bounce.tracking.mailbox import PoseSample


@dataclass
class RoundStats:
    """
    Round counters, for the HUD.

    :ivar rounds (int): Rounds lost so far.
    :ivar bounces (int): Paddle bounces over the whole session.
    :ivar rally (int): Paddle bounces in the current round.
    :ivar best_rally (int): Longest rally so far.
    """

    rounds: int = 0
    bounces: int = 0
    rally: int = 0
    best_rally: int = 0

    def record_bounce(self):
        """Count one paddle bounce."""
        self.bounces += 1
        self.rally += 1
        self.best_rally = max(self.best_rally, self.rally)

    def record_round(self):
        """Close the current round."""
        self.rounds += 1
        self.rally = 0


def spawn_ball(settings: BounceSettings) -> Ball:
    """Ball at the field center with the start velocity."""
    cx, cy = settings.field.center
    return Ball.spawn(
        cx, cy, settings.ball_radius, velocity=settings.ball_start_velocity
    )


def spawn_paddle(settings: BounceSettings) -> Paddle:
    """Paddle in its default pose."""
    return Paddle.create(
        settings.field,
        radius=settings.control_point_radius,
        margin=settings.contact_margin,
        offset=settings.paddle_start_offset,
    )


@dataclass
class BounceWorld:
    """
    Pinch Bounce world state.

    :ivar settings (BounceSettings): Session settings.
    :ivar physics (PhysicsWorld): World integrating ball and control points.
    :ivar ball (Ball): Ball entity.
    :ivar paddle (Paddle): Paddle entity.
    :ivar stats (RoundStats): Round counters.
    """

    settings: BounceSettings
    physics: PhysicsWorld
    ball: Ball
    paddle: Paddle
    stats: RoundStats = field(default_factory=RoundStats)

    @classmethod
    def create(
        cls,
        settings: BounceSettings,
        physics: Optional[PhysicsWorld] = None,
    ) -> "BounceWorld":
        """
        Build a world in its start state.

        :param settings: Session settings.
        :type settings: BounceSettings
        :param physics: Physics world to populate, a `KinematicWorld` with
            the session gravity if omitted.
        :type physics: PhysicsWorld | None
        :return: The new world.
        :rtype: BounceWorld
        """
        if physics is None:
            physics = KinematicWorld(
                gravity=settings.gravity, air_friction=settings.air_friction
            )
        world = cls(
            settings=settings,
            physics=physics,
            ball=spawn_ball(settings),
            paddle=spawn_paddle(settings),
        )
        world.physics.clear()
        world.physics.add(world.ball.body, *world.paddle.bodies)
        return world

    @property
    def field(self) -> Field:
        """Play field."""
        return self.settings.field

    def reset(self):
        """
        Replace ball and paddle with fresh ones and repopulate the physics
        world. Everything is built before anything is swapped in.
        """
        ball = spawn_ball(self.settings)
        paddle = spawn_paddle(self.settings)

        self.physics.clear()
        self.physics.add(ball.body, *paddle.bodies)
        self.ball = ball
        self.paddle = paddle


# Justification: flags set by the systems during one tick
# pylint: disable=too-many-instance-attributes
@dataclass
class BounceTickContext:
    """
    Context for one frame of the game loop.

    :ivar world (BounceWorld): World state, mutated during the tick.
    :ivar dt (float): Physics step for this tick.
    :ivar frame (int): Frame number, starting at 1.
    :ivar intent (Optional[PoseSample]): Pose snapshot taken for this tick.
    :ivar pose_applied (bool): Whether the paddle moved to the pose.
    :ivar bounced (bool): Whether the ball bounced off the paddle.
    :ivar clamped (bool): Whether a wall corrected the ball velocity.
    :ivar reset (bool): Whether the round was reset this tick.
    """

    world: BounceWorld
    dt: float
    frame: int = 0
    intent: Optional[PoseSample] = None
    pose_applied: bool = False
    bounced: bool = False
    clamped: bool = False
    reset: bool = False


# pylint: enable=too-many-instance-attributes
