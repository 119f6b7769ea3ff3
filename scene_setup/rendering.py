import logging
import os

import bpy

from scene_setup.models import RenderModel

logger = logging.getLogger(__name__)


def clear_scene():
    """Remove all objects and orphaned data blocks from the scene."""
    # Remove objects
    if bpy.context.mode != 'OBJECT' and bpy.context.active_object is not None:
        bpy.ops.object.mode_set(mode='OBJECT')
    for obj in list(bpy.data.objects):
        bpy.data.objects.remove(obj, do_unlink=True)

    for collection in list(bpy.data.collections):
        bpy.data.collections.remove(collection)

    # Remove orphaned data blocks; repeat to catch dependencies
    for _ in range(3):
        for data_blocks in (bpy.data.meshes, bpy.data.materials, bpy.data.cameras, bpy.data.lights):
            for block in list(data_blocks):
                if block.users == 0:
                    data_blocks.remove(block)


def setup_render(render_model: RenderModel):
    """Apply engine, sampling, resolution and output format settings."""
    scene = bpy.context.scene
    resolution = render_model.resolution

    scene.render.engine = render_model.engine
    scene.render.image_settings.file_format = render_model.file_format
    scene.render.resolution_x = resolution.width
    scene.render.resolution_y = resolution.height
    scene.render.resolution_percentage = resolution.resolution_percentage
    if render_model.engine == "CYCLES":
        scene.cycles.samples = render_model.samples


def resize_render_surface(width: int, height: int):
    """Match the render resolution to the size of the surface it is shown in."""
    if width <= 0 or height <= 0:
        logger.debug(f"Ignoring resize to empty surface {width}x{height}")
        return
    scene = bpy.context.scene
    scene.render.resolution_x = width
    scene.render.resolution_y = height
    logger.info(f"Render surface resized to {width}x{height}")


def render_still(output_path: str) -> str:
    """Render the current scene to `output_path` and return the path."""
    output_dir = os.path.dirname(output_path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    bpy.context.scene.render.filepath = output_path
    bpy.ops.render.render(write_still=True)
    logger.info(f"Rendered scene to {output_path}")
    return output_path
