"""
Frame driver for Pinch Bounce.
"""

from __future__ import annotations

import random
from typing import Optional, Sequence, Union

from mini_arcade_core.scenes.systems.system_pipeline import SystemPipeline
from mini_arcade_core.utils import logger

from pinch_bounce.entities import Ball, Paddle
from pinch_bounce.entities.paddle import PointLike
from pinch_bounce.models import BounceTickContext, BounceWorld, RoundStats
from pinch_bounce.physics.world import PhysicsWorld
from pinch_bounce.settings import BounceSettings, Field
from pinch_bounce.systems import (
    BoundsGuard,
    CollisionResolver,
    PaddlePoseSystem,
    PhysicsStepSystem,
    RoundController,
)
from pinch_bounce.tracking.mailbox import PoseMailbox


class GameLoop:
    """
    Runs one synchronous update per rendered frame.

    Frame order: pose -> paddle collision -> wall clamp -> round check ->
    physics step. A round reset skips the physics step of that frame.

    The tracker callback must run on the same thread as `update()`; the
    pose is read once at the start of each frame.
    """

    def __init__(
        self,
        *,
        rng: Optional[random.Random] = None,
        physics: Optional[PhysicsWorld] = None,
    ):
        """
        :param rng: Random source for the bounce jitter.
        :type rng: random.Random, optional

        :param physics: Physics world to drive, a `KinematicWorld` if omitted.
        :type physics: PhysicsWorld, optional
        """
        self._rng = rng or random.Random()
        self._physics = physics
        self.mailbox = PoseMailbox()
        self.world: Optional[BounceWorld] = None
        self.systems: SystemPipeline[BounceTickContext] = SystemPipeline()
        self.frame = 0

    def initialize(
        self, config: Union[BounceSettings, Field, None] = None
    ) -> BounceWorld:
        """
        Build the world and the system pipeline. Calling it again starts a
        fresh session.

        :param config: Session settings, or just a field size to use with
            the default settings.
        :type config: BounceSettings | Field | None
        :return: The new world.
        :rtype: BounceWorld
        """
        if isinstance(config, Field):
            settings = BounceSettings(width=config.width, height=config.height)
        else:
            settings = config or BounceSettings()

        self.world = BounceWorld.create(settings, self._physics)
        self.mailbox.clear()
        self.frame = 0

        self.systems = SystemPipeline()
        self.systems.extend(
            [
                PaddlePoseSystem(),
                CollisionResolver(
                    jitter=settings.bounce_jitter,
                    boost=settings.bounce_boost,
                    rng=self._rng,
                ),
                BoundsGuard(),
                RoundController(),
                PhysicsStepSystem(),
            ]
        )
        logger.info(
            f"Pinch Bounce initialized on a {settings.width:g}x"
            f"{settings.height:g} field"
        )
        return self.world

    def on_pose_sample(self, points: Optional[Sequence[PointLike]]) -> bool:
        """
        Tracker callback: store the latest thumb/index pair.

        :param points: Thumb tip and index fingertip, or None / empty when
            no hand is detected.
        :type points: Sequence[Sequence[float]] | None
        :return: False if the sample was rejected as malformed.
        :rtype: bool
        """
        return self.mailbox.post(points)

    def update(self) -> BounceTickContext:
        """
        Advance the game by one frame.

        :return: The tick context, with flags describing what happened.
        :rtype: BounceTickContext
        :raises RuntimeError: If `initialize` was not called.
        """
        world = self._require_world()
        self.frame += 1
        ctx = BounceTickContext(
            world=world,
            dt=world.settings.timestep,
            frame=self.frame,
            intent=self.mailbox.latest(),
        )
        self.systems.step(ctx)
        return ctx

    @property
    def ball(self) -> Ball:
        """Current ball, replaced on every round reset."""
        return self._require_world().ball

    @property
    def paddle(self) -> Paddle:
        """Current paddle, replaced on every round reset."""
        return self._require_world().paddle

    @property
    def field(self) -> Field:
        """Play field."""
        return self._require_world().field

    @property
    def stats(self) -> RoundStats:
        """Round counters."""
        return self._require_world().stats

    def _require_world(self) -> BounceWorld:
        if self.world is None:
            raise RuntimeError("GameLoop.initialize() must be called first")
        return self.world
