class ChessSceneError(Exception):
    """Base class for errors raised while setting up the chess scene."""


class ConfigurationError(ChessSceneError, ValueError):
    """Raised when a scene configuration value is invalid."""


class RenderSurfaceNotFoundError(ChessSceneError):
    """Raised when the area the scene should be drawn into does not exist."""

    def __init__(self, surface: str):
        self.surface = surface
        super().__init__(
            f"No '{surface}' area found to render into. "
            "Run Blender with its interface, or set loop.mode to 'still' for headless rendering."
        )
