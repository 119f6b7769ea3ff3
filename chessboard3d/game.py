import logging
from typing import Any

import bpy

from chessboard3d.board import Board, ChessBoard
from chessboard3d.config.models import ChessSceneConfig
from chessboard3d.layout import populate_starting_position
from chessboard3d.pieces import ChessPiece
from chessboard3d.scene_graph import SceneGraph
from scene_setup.camera import attach_camera_to_viewport, build_camera_from_config
from scene_setup.environment.standard_lighting import build_lighting_from_config
from scene_setup.models import LoopMode
from scene_setup.realize import RealizedScene, realize_scene_graph
from scene_setup.rendering import clear_scene, render_still, resize_render_surface, setup_render
from utils.blender_utils import BlenderTimerScheduler, find_render_surface, surface_size, tag_redraw
from utils.debounce import Debouncer, Scheduler
from utils.render_loop import RenderLoop

logger = logging.getLogger(__name__)


class ChessGame:
    """
    Builds the chess scene in Blender and keeps it on screen.

    In interactive mode the scene is redrawn every frame in a 3D viewport and
    viewport resizes are debounced into render-resolution updates. In still
    mode a single image is rendered instead.
    """

    def __init__(self, config: ChessSceneConfig, scheduler: Scheduler | None = None):
        self.config = config
        self.scheduler = scheduler if scheduler is not None else BlenderTimerScheduler()
        self.graph = SceneGraph()
        self.board: Board | None = None
        self.pieces: list[ChessPiece] = []
        self.realized: RealizedScene | None = None
        self.camera: bpy.types.Object | None = None
        self.light: bpy.types.Object | None = None
        self.loop: RenderLoop | None = None
        self._area: bpy.types.Area | None = None
        self.resize = Debouncer(resize_render_surface, config.loop.resize_debounce_ms, self.scheduler)

    def build(self) -> RealizedScene:
        """Construct camera, light, board and pieces, then create their Blender objects."""
        clear_scene()
        setup_render(self.config.render)
        self.camera = build_camera_from_config(self.config.camera)
        self.light = build_lighting_from_config(self.config.lighting)

        self.graph = SceneGraph()
        self.board = ChessBoard(self.config.board).create(self.graph)

        if self.config.pieces.enabled:
            self.pieces = populate_starting_position(
                self.board,
                self.config.pieces.get_material_model('dark'),
                self.config.pieces.get_material_model('light'),
                layout=self.config.pieces.layout_types(),
            )
        else:
            self.pieces = []

        self.realized = realize_scene_graph(self.graph)
        return self.realized

    def start(self) -> Any:
        """
        Build the scene and present it.

        Returns:
            The output path in still mode, the running RenderLoop otherwise

        Raises:
            RenderSurfaceNotFoundError: In interactive mode, when there is no viewport to draw into
        """
        if self.config.loop.mode == LoopMode.STILL:
            self.build()
            return render_still(self.config.loop.output_path)

        # Fail before building anything when there is nothing to draw into
        _, self._area = find_render_surface(self.config.loop.surface)
        self.build()
        attach_camera_to_viewport(self.config.camera, self._area)

        self.loop = RenderLoop(
            self._render,
            self.scheduler,
            fps=self.config.loop.fps,
            surface_size=lambda: surface_size(self._area),
            on_resize=self.resize,
        )
        self.loop.start()
        return self.loop

    def stop(self):
        if self.loop is not None:
            self.loop.stop()
        self.resize.cancel()

    def _render(self):
        tag_redraw(self._area)
