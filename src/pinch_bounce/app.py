"""
Minimal main application for Pinch Bounce.
"""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

import cv2
from mini_arcade_core.utils import logger

from pinch_bounce.constants import (
    CAMERA_INDEX,
    FPS,
    MIRROR_CAMERA,
    WINDOW_SIZE,
    WINDOW_TITLE,
)
from pinch_bounce.loop import GameLoop
from pinch_bounce.render import BounceRenderer
from pinch_bounce.settings import BounceSettings

QUIT_KEYS = (27, ord("q"))


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line options."""
    parser = argparse.ArgumentParser(
        prog="pinch-bounce",
        description="Bounce a ball off the line between your thumb and index.",
    )
    parser.add_argument("--camera", type=int, default=CAMERA_INDEX)
    parser.add_argument("--width", type=int, default=WINDOW_SIZE[0])
    parser.add_argument("--height", type=int, default=WINDOW_SIZE[1])
    parser.add_argument("--fps", type=int, default=FPS)
    parser.add_argument(
        "--no-mirror",
        dest="mirror",
        action="store_false",
        default=MIRROR_CAMERA,
        help="do not flip the camera image horizontally",
    )
    return parser.parse_args(argv)


def open_camera(index: int, width: int, height: int) -> cv2.VideoCapture:
    """
    Open the webcam at the requested size.

    :raises RuntimeError: If the camera cannot be opened.
    """
    cap = cv2.VideoCapture(index)
    cap.set(cv2.CAP_PROP_FRAME_WIDTH, width)
    cap.set(cv2.CAP_PROP_FRAME_HEIGHT, height)
    if not cap.isOpened():
        cap.release()
        raise RuntimeError(f"Cannot open camera {index}")
    logger.info(f"Camera {index} opened")
    return cap


def run(argv: Optional[Sequence[str]] = None):
    """
    Main entry point for Pinch Bounce.

    - Opens the webcam and the MediaPipe hand tracker.
    - Feeds the fingertips of each frame to the game loop.
    - Draws the game over the (mirrored) camera image until ESC or Q.
    """
    # Justification: mediapipe ships in the optional camera extra
    # pylint: disable-next=import-outside-toplevel
    from pinch_bounce.tracking.hand_tracker import HandTracker

    args = parse_args(argv)
    settings = BounceSettings(width=args.width, height=args.height)

    game = GameLoop()
    game.initialize(settings)
    renderer = BounceRenderer()
    delay_ms = max(1, int(1000 / max(1, args.fps)))

    cap = open_camera(args.camera, args.width, args.height)
    logger.info("Starting Pinch Bounce...")
    try:
        with HandTracker() as tracker:
            while True:
                ok, frame = cap.read()
                if not ok:
                    logger.warning("Camera frame dropped")
                    frame = None
                else:
                    frame = cv2.resize(frame, (args.width, args.height))
                    if args.mirror:
                        frame = cv2.flip(frame, 1)
                    tracker.detect_into(frame, game.on_pose_sample)

                ctx = game.update()
                cv2.imshow(WINDOW_TITLE, renderer.render(frame, ctx))

                if cv2.waitKey(delay_ms) & 0xFF in QUIT_KEYS:
                    break
    finally:
        cap.release()
        cv2.destroyAllWindows()
        logger.info(
            f"Stopped after {game.stats.rounds} round(s), "
            f"best rally {game.stats.best_rally}"
        )


if __name__ == "__main__":
    run()
