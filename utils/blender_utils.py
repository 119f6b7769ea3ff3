import logging
from collections.abc import Callable
from typing import Any

import bpy

from chessboard3d.config.models import MaterialModel
from chessboard3d.errors import RenderSurfaceNotFoundError
from utils.debounce import run_logged

logger = logging.getLogger(__name__)


def create_material(material_config: MaterialModel) -> bpy.types.Material:
    """Create a Blender material from configuration."""
    if material_config.custom_material:
        return material_config.custom_material

    material = bpy.data.materials.new(name=material_config.material_name or "ChessMaterial")
    material.use_nodes = True
    nodes = material.node_tree.nodes
    bsdf = nodes["Principled BSDF"]
    bsdf.inputs["Base Color"].default_value = material_config.rgba()
    bsdf.inputs["Roughness"].default_value = material_config.roughness

    # Viewport colour, used by the solid shading of the interactive view
    material.diffuse_color = material_config.rgba()
    return material


class MaterialCache:
    """Builds each distinct material reference into a Blender material once."""

    def __init__(self):
        self._materials: dict[int, tuple[Any, bpy.types.Material]] = {}

    def get(self, material: Any) -> bpy.types.Material | None:
        if material is None:
            return None
        if isinstance(material, bpy.types.Material):
            return material

        # Keep the reference alongside its material so its id stays unique
        cached = self._materials.get(id(material))
        if cached is None:
            if not isinstance(material, MaterialModel):
                raise TypeError(f"Cannot build a Blender material from {type(material).__name__}")
            cached = (material, create_material(material))
            self._materials[id(material)] = cached
        return cached[1]

    def __len__(self) -> int:
        return len(self._materials)


class BlenderTimerScheduler:
    """Scheduler running callbacks from Blender's event loop (bpy.app.timers)."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> Callable[[], None]:
        def timer() -> None:
            run_logged(callback)
            # Returning None unregisters the timer

        bpy.app.timers.register(timer, first_interval=delay)
        return timer

    def cancel(self, handle: Callable[[], None]) -> None:
        if bpy.app.timers.is_registered(handle):
            bpy.app.timers.unregister(handle)


def find_render_surface(area_type: str = "VIEW_3D") -> tuple[bpy.types.Window, bpy.types.Area]:
    """
    Find the window area the scene is drawn into.

    Raises:
        RenderSurfaceNotFoundError: If no open window has an area of that type
    """
    window_manager = bpy.context.window_manager
    windows = window_manager.windows if window_manager is not None else []
    for window in windows:
        for area in window.screen.areas:
            if area.type == area_type:
                return window, area
    raise RenderSurfaceNotFoundError(area_type)


def surface_size(area: bpy.types.Area) -> tuple[int, int]:
    """Current size of an area in pixels."""
    return area.width, area.height


def tag_redraw(area: bpy.types.Area) -> None:
    """Ask Blender to redraw the area on its next event loop iteration."""
    area.tag_redraw()
