"""Coordinate helpers shared by the scene graph and the Blender scene setup."""

import math
from collections.abc import Sequence


def to_blender_axes(position: Sequence[float]) -> tuple[float, float, float]:
    """
    Convert a y-up position to Blender's z-up axes.

    Scene-graph depth (z) becomes Blender's y and height (y) becomes Blender's z.
    """
    x, y, z = position
    return (x, z, y)


def arc_rotate_position(
    alpha: float,
    beta: float,
    radius: float,
    target: Sequence[float] = (0.0, 0.0, 0.0),
) -> tuple[float, float, float]:
    """
    Position of an orbit camera in y-up space.

    Args:
        alpha: Angle around the vertical axis, in radians
        beta: Angle from the vertical axis, in radians (0 looks straight down)
        radius: Distance to the target
        target: Point the camera orbits around

    Returns:
        tuple[float, float, float]: (x, y, z) camera position
    """
    tx, ty, tz = target
    return (
        tx + radius * math.cos(alpha) * math.sin(beta),
        ty + radius * math.cos(beta),
        tz + radius * math.sin(alpha) * math.sin(beta),
    )
