import logging

import bpy
from mathutils import Vector

from scene_setup.models import LightingModel
from utils.geometry import to_blender_axes

logger = logging.getLogger(__name__)


def create_sky_light(direction: tuple[float, float, float], strength: float) -> bpy.types.Object:
    """
    Create a sun lamp lighting the scene from `direction` (y-up).

    The lamp shines along -direction, so (0, 1, 0) lights the board from above.
    """
    sky = Vector(to_blender_axes(direction)).normalized()

    bpy.ops.object.light_add(type='SUN', location=tuple(sky * 10))
    light = bpy.context.active_object
    light.name = "light1"
    light.data.energy = strength
    light.rotation_euler = (-sky).to_track_quat('-Z', 'Y').to_euler()
    return light


def set_ambient(color: tuple[float, float, float]):
    """Use a flat world colour as ambient fill."""
    scene = bpy.context.scene
    if scene.world is None:
        scene.world = bpy.data.worlds.new("World")
    scene.world.use_nodes = False
    scene.world.color = color


def build_lighting_from_config(lighting_model: LightingModel) -> bpy.types.Object:
    """Create the scene light from its configuration."""
    strength = lighting_model.strength()
    light = create_sky_light(lighting_model.direction, strength)
    set_ambient(lighting_model.ambient_color)
    logger.info(f"Created sky light with strength {strength}")
    return light
