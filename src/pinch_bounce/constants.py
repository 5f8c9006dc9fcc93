"""
Game constants for Pinch Bounce.
"""

from __future__ import annotations

WINDOW_SIZE = (640, 480)
FPS = 60
WINDOW_TITLE = "Pinch Bounce"

# Ball
BALL_RADIUS = 20.0
BALL_START_VELOCITY = (0.0, 0.0)

# Paddle (thumb / index control points)
CONTROL_POINT_RADIUS = 16.0
CONTACT_MARGIN = 20.0  # added to the control point radius
PADDLE_START_OFFSET = 50.0  # horizontal offset from the field center

# Bounce response
BOUNCE_JITTER = (-5.0, 5.0)
BOUNCE_BOOST = 1.2

# Physics, in pixels per tick
TIMESTEP = 1.0
GRAVITY = 0.28
AIR_FRICTION = 0.01

# Hand landmarks (MediaPipe hand model indices)
THUMB_TIP = 4
INDEX_FINGER_TIP = 8

# Camera
CAMERA_INDEX = 0
MIRROR_CAMERA = True
FINGERTIP_RING_DIAMETER = 28
