"""
Wheel zoom.

Zoom velocity is proportional to the current magnification: big steps when
zoomed far in, fine steps near the bottom of the range. The damped profile
measures magnification from a baseline below ``min_scale`` so that the first
wheel ticks away from 1.0 are not vanishingly small.
"""

from __future__ import annotations

import logging
import math

from config import ZoomConfig, ZoomProfile
from session import ViewportState

logger = logging.getLogger(__name__)


def clamp(value: float, minimum: float, maximum: float) -> float:
    return max(minimum, min(maximum, value))


def damping(scale: float, zoom: ZoomConfig) -> float:
    if zoom.profile is ZoomProfile.DAMPED:
        return scale - zoom.baseline
    return scale


def next_scale(scale: float, delta_y: float, zoom: ZoomConfig) -> float:
    """
    scale' = clamp(scale + delta_y * -sensitivity * damping(scale), min, max)

    Negative ``delta_y`` (wheel up) zooms in. A non-finite delta is ignored.
    """
    if not math.isfinite(delta_y):
        return clamp(scale, zoom.min_scale, zoom.max_scale)
    step = delta_y * -zoom.sensitivity * damping(scale, zoom)
    return clamp(scale + step, zoom.min_scale, zoom.max_scale)


class ViewportController:
    """Owns the zoom arithmetic for one session's ``ViewportState``."""

    def __init__(self, state: ViewportState, zoom: ZoomConfig):
        self.state = state
        self.zoom_config = zoom

    @property
    def scale(self) -> float:
        return self.state.scale

    def zoom(self, delta_y: float) -> float:
        """Apply one wheel event and return the new scale."""
        old = self.state.scale
        self.state.scale = next_scale(old, delta_y, self.zoom_config)
        logger.debug("zoom delta_y=%s: %.4f -> %.4f", delta_y, old, self.state.scale)
        return self.state.scale
