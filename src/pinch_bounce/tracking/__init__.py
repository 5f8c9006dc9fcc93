"""
Pose input for Pinch Bounce.

Only the mailbox is exported here; `hand_tracker` needs the optional camera
dependencies and is imported by the app.
"""

from __future__ import annotations

from .mailbox import PoseMailbox, PoseSample

__all__ = [
    "PoseMailbox",
    "PoseSample",
]
