"""
Run Pinch Bounce with ``python -m pinch_bounce``.
"""

from __future__ import annotations

from pinch_bounce.app import run

run()
