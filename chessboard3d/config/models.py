from dataclasses import dataclass, field
from typing import Any

from chessboard3d.errors import ConfigurationError
from chessboard3d.pieces.types import PieceType
from scene_setup.models import CameraModel, LightingModel, LoopModel, RenderModel


@dataclass
class MaterialModel:
    """Configuration for material properties."""
    color: str | tuple[float, float, float, float] = "white"
    roughness: float = 0.5
    material_name: str | None = None
    custom_material: Any | None = None  # For Blender material object

    # Named colors accepted in configuration files
    COLOR_NAMES = {
        "black": (0.0, 0.0, 0.0, 1.0),
        "white": (1.0, 1.0, 1.0, 1.0),
        "dark_gray": (0.2, 0.2, 0.2, 1.0),
        "light_gray": (0.8, 0.8, 0.8, 1.0),
    }

    def rgba(self) -> tuple[float, float, float, float]:
        """Resolve the configured color to an RGBA tuple."""
        if isinstance(self.color, str):
            try:
                return self.COLOR_NAMES[self.color.lower()]
            except KeyError:
                raise ConfigurationError(
                    f"Unknown color name: {self.color}. Must be one of {list(self.COLOR_NAMES)} or an RGBA tuple"
                ) from None

        color = tuple(float(c) for c in self.color)
        if len(color) == 3:
            color = color + (1.0,)
        if len(color) != 4:
            raise ConfigurationError(f"Color must have 3 or 4 components, got {self.color}")
        return color

    def to_dict(self) -> dict[str, Any]:
        """Convert the config to a dictionary."""
        return {
            'color': self.color,
            'roughness': self.roughness,
            'material_name': self.material_name,
            # Skip custom_material as it's not serializable
        }

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> 'MaterialModel':
        """Create a MaterialModel from a dictionary."""
        if not isinstance(config, dict):
            config = {}

        default_instance = cls()
        color = config.get('color', default_instance.color)
        if isinstance(color, list):
            color = tuple(color)
        return cls(
            color=color,
            roughness=config.get('roughness', default_instance.roughness),
            material_name=config.get('material_name', default_instance.material_name),
            custom_material=config.get('custom_material', default_instance.custom_material)
        )


@dataclass
class BoardModel:
    """Configuration for the chess board."""
    cells_count: int = 8
    cell_size: float = 1.0
    board_height: float = 0.2
    board_material: dict[str, Any] = field(default_factory=lambda: {
        "color": (0.4, 0.2, 0.05, 1.0),  # Brown
        "material_name": "board"
    })
    dark_cell_material: dict[str, Any] = field(default_factory=lambda: {
        "color": "black",
        "material_name": "black"
    })
    light_cell_material: dict[str, Any] = field(default_factory=lambda: {
        "color": "white",
        "material_name": "white"
    })

    def validate(self) -> None:
        """Check the board dimensions are usable."""
        if not isinstance(self.cells_count, int) or self.cells_count < 1:
            raise ConfigurationError(f"cells_count must be a positive integer, got {self.cells_count}")
        if self.cell_size <= 0:
            raise ConfigurationError(f"cell_size must be positive, got {self.cell_size}")
        if self.board_height <= 0:
            raise ConfigurationError(f"board_height must be positive, got {self.board_height}")

    def to_dict(self) -> dict[str, Any]:
        """Convert the config to a dictionary."""
        return {
            'cells_count': self.cells_count,
            'cell_size': self.cell_size,
            'board_height': self.board_height,
            'board_material': self.board_material,
            'dark_cell_material': self.dark_cell_material,
            'light_cell_material': self.light_cell_material
        }

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> 'BoardModel':
        """Create a BoardModel from a dictionary."""
        if not isinstance(config, dict):
            config = {}

        default_instance = cls()
        model = cls(
            cells_count=config.get('cells_count', default_instance.cells_count),
            cell_size=config.get('cell_size', default_instance.cell_size),
            board_height=config.get('board_height', default_instance.board_height),
            board_material=config.get('board_material', default_instance.board_material),
            dark_cell_material=config.get('dark_cell_material', default_instance.dark_cell_material),
            light_cell_material=config.get('light_cell_material', default_instance.light_cell_material)
        )
        model.validate()
        return model

    def get_material_model(self, material_type: str) -> MaterialModel:
        """
        Create a MaterialModel from the stored material configuration.

        Args:
            material_type: One of 'board', 'dark' or 'light'

        Returns:
            MaterialModel instance
        """
        material_config = {
            'board': self.board_material,
            'dark': self.dark_cell_material,
            'light': self.light_cell_material
        }.get(material_type)

        if material_config is None:
            raise ValueError(f"Invalid material type: {material_type}")

        return MaterialModel.from_dict(material_config)


@dataclass
class PiecesModel:
    """Configuration for the chess pieces."""
    enabled: bool = True
    layout: list[str] = field(default_factory=list)  # Empty means the standard starting layout
    dark_material: dict[str, Any] = field(default_factory=lambda: {
        "color": "dark_gray",
        "material_name": "black-piece"
    })
    light_material: dict[str, Any] = field(default_factory=lambda: {
        "color": "light_gray",
        "material_name": "white-piece"
    })

    def layout_types(self) -> list[PieceType] | None:
        """Parse the configured layout, or None for the standard one."""
        if not self.layout:
            return None
        return [PieceType.from_name(name) for name in self.layout]

    def to_dict(self) -> dict[str, Any]:
        """Convert the config to a dictionary."""
        return {
            'enabled': self.enabled,
            'layout': self.layout,
            'dark_material': self.dark_material,
            'light_material': self.light_material
        }

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> 'PiecesModel':
        """Create a PiecesModel from a dictionary."""
        if not isinstance(config, dict):
            config = {}

        default_instance = cls()
        model = cls(
            enabled=config.get('enabled', default_instance.enabled),
            layout=list(config.get('layout', default_instance.layout)),
            dark_material=config.get('dark_material', default_instance.dark_material),
            light_material=config.get('light_material', default_instance.light_material)
        )
        layout_types = model.layout_types()
        if layout_types is not None and len(layout_types) != 16:
            raise ConfigurationError(
                f"A piece layout needs 16 entries (back rank then pawn rank), got {len(layout_types)}"
            )
        return model

    def get_material_model(self, color: str) -> MaterialModel:
        """Return the material for 'dark' or 'light' pieces."""
        material_config = {
            'dark': self.dark_material,
            'light': self.light_material
        }.get(color)

        if material_config is None:
            raise ValueError(f"Invalid piece color: {color}")

        return MaterialModel.from_dict(material_config)


@dataclass
class ChessSceneConfig:
    """Complete configuration of a chess scene."""
    board: BoardModel = field(default_factory=BoardModel)
    pieces: PiecesModel = field(default_factory=PiecesModel)
    camera: CameraModel = field(default_factory=CameraModel)
    lighting: LightingModel = field(default_factory=LightingModel)
    render: RenderModel = field(default_factory=RenderModel)
    loop: LoopModel = field(default_factory=LoopModel)

    def to_dict(self) -> dict[str, Any]:
        """Convert the config to a dictionary."""
        return {
            'board': self.board.to_dict(),
            'pieces': self.pieces.to_dict(),
            'camera': self.camera.to_dict(),
            'lighting': self.lighting.to_dict(),
            'render': self.render.to_dict(),
            'loop': self.loop.to_dict()
        }

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> 'ChessSceneConfig':
        """Create a ChessSceneConfig from a dictionary."""
        if not isinstance(config, dict):
            config = {}

        return cls(
            board=BoardModel.from_dict(config.get('board', {})),
            pieces=PiecesModel.from_dict(config.get('pieces', {})),
            camera=CameraModel.from_dict(config.get('camera', {})),
            lighting=LightingModel.from_dict(config.get('lighting', {})),
            render=RenderModel.from_dict(config.get('render', {})),
            loop=LoopModel.from_dict(config.get('loop', {}))
        )
