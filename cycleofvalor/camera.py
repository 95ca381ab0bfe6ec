"""Window and camera settings for the game view."""

from __future__ import annotations

from typing import Optional

BASE_APP_HEIGHT = 390.0
BASE_CAM_SCALE = 5.0

WINDOW_TITLE = "Bevy Jam 5"
WINDOW_RESOLUTION = (844.0, 390.0)
GLOBAL_VOLUME = 0.3

CAMERA_NEAR = -500.0
CAMERA_FAR = 500.0

_F32_EPSILON = 1.1920929e-07


def camera_scale(window_height: float) -> Optional[float]:
    """Projection scale that keeps the view fixed for a window height.

    Returns None when the window has no height, leaving the scale unchanged.
    """
    if window_height > _F32_EPSILON:
        return BASE_APP_HEIGHT / window_height * BASE_CAM_SCALE
    return None