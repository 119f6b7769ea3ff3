import logging

import bpy
from mathutils import Vector

from scene_setup.models import CameraKind, CameraModel
from utils.geometry import arc_rotate_position, to_blender_axes

logger = logging.getLogger(__name__)


def camera_location(camera_model: CameraModel) -> tuple[float, float, float]:
    """Blender location of the camera described by the model."""
    if camera_model.kind == CameraKind.ARC_ROTATE:
        position = arc_rotate_position(
            camera_model.alpha,
            camera_model.beta,
            camera_model.radius,
            camera_model.target
        )
    else:
        position = camera_model.location
    return to_blender_axes(position)


def create_camera(location: tuple[float, float, float],
                  target: tuple[float, float, float],
                  lens: float = 50.0) -> bpy.types.Object:
    """
    Create a camera at `location` looking at `target` (both in Blender axes).

    Returns:
        bpy.types.Object: The created camera object
    """
    bpy.ops.object.camera_add(location=location)
    camera = bpy.context.active_object
    camera.name = "camera"
    camera.data.lens = lens

    # Point camera at the target
    direction = Vector(target) - Vector(location)
    rot_quat = direction.to_track_quat('-Z', 'Y')
    camera.rotation_euler = rot_quat.to_euler()

    # Set as active camera
    bpy.context.scene.camera = camera

    return camera


def build_camera_from_config(camera_model: CameraModel) -> bpy.types.Object:
    """Create the scene camera from its configuration."""
    location = camera_location(camera_model)
    camera = create_camera(location, to_blender_axes(camera_model.target), camera_model.lens)
    logger.info(f"Created {camera_model.kind.value} camera at {tuple(round(c, 3) for c in location)}")
    return camera


def attach_camera_to_viewport(camera_model: CameraModel, area: bpy.types.Area):
    """
    Look through the scene camera in a 3D viewport.

    An orbit camera follows viewport navigation; a free camera stays fixed.
    """
    space = area.spaces.active
    space.region_3d.view_perspective = 'CAMERA'
    space.lock_camera = camera_model.kind == CameraKind.ARC_ROTATE
