from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from chessboard3d.errors import ConfigurationError


class CameraKind(Enum):
    """Enum for camera behaviours."""
    ARC_ROTATE = "arc_rotate"  # Orbits the target, driven by viewport navigation
    FREE = "free"              # Fixed location looking at the target


class LoopMode(Enum):
    """Enum for how the scene is presented."""
    INTERACTIVE = "interactive"  # Continuous redraw in a 3D viewport
    STILL = "still"              # Render a single image (headless)


@dataclass
class CameraModel:
    """Model for camera configuration."""
    kind: CameraKind = CameraKind.ARC_ROTATE
    alpha: float = 0.0     # Horizontal orbit angle in radians
    beta: float = 0.5      # Angle from the up axis in radians
    radius: float = 20.0
    target: tuple[float, float, float] = (0.0, 0.0, 0.0)
    location: tuple[float, float, float] = (0.0, 5.0, -10.0)  # Only used by free cameras
    lens: float = 50.0

    def to_dict(self) -> dict[str, Any]:
        """Convert the model to a dictionary format."""
        return {
            "kind": self.kind.value,
            "alpha": self.alpha,
            "beta": self.beta,
            "radius": self.radius,
            "target": self.target,
            "location": self.location,
            "lens": self.lens
        }

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> 'CameraModel':
        """Create a CameraModel from a dictionary."""
        if not isinstance(config, dict):
            config = {}

        default_instance = cls()
        try:
            kind = CameraKind(config.get("kind", default_instance.kind.value))
        except ValueError:
            raise ConfigurationError(
                f"Invalid camera kind: {config.get('kind')}. Must be one of {[k.value for k in CameraKind]}"
            ) from None

        model = cls(
            kind=kind,
            alpha=float(config.get("alpha", default_instance.alpha)),
            beta=float(config.get("beta", default_instance.beta)),
            radius=float(config.get("radius", default_instance.radius)),
            target=tuple(config.get("target", default_instance.target)),
            location=tuple(config.get("location", default_instance.location)),
            lens=float(config.get("lens", default_instance.lens))
        )
        if model.radius <= 0:
            raise ConfigurationError(f"Camera radius must be positive, got {model.radius}")
        return model


@dataclass
class LightingModel:
    """Model for lighting configuration."""
    # Sun strength presets
    LIGHTING_PRESETS = {
        "very_low": 1.0,
        "low": 2.0,
        "medium": 3.0,
        "high": 4.5,
        "very_high": 6.0
    }

    lighting: str | float = "medium"  # Preset name or an explicit sun strength
    direction: tuple[float, float, float] = (0.0, 1.0, 0.0)  # Towards the sky, y is up
    ambient_color: tuple[float, float, float] = (0.05, 0.05, 0.05)

    def strength(self) -> float:
        """Resolve the configured intensity to a sun strength."""
        if isinstance(self.lighting, str):
            if self.lighting not in self.LIGHTING_PRESETS:
                raise ConfigurationError(
                    f"Invalid lighting intensity: {self.lighting}. "
                    f"Must be one of {list(self.LIGHTING_PRESETS.keys())} or a float strength"
                )
            return self.LIGHTING_PRESETS[self.lighting]
        return float(self.lighting)

    def to_dict(self) -> dict[str, Any]:
        """Convert the model to a dictionary format."""
        return {
            "lighting": self.lighting,
            "direction": self.direction,
            "ambient_color": self.ambient_color
        }

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> 'LightingModel':
        """Create a LightingModel from a dictionary."""
        if not isinstance(config, dict):
            config = {}

        default_instance = cls()
        model = cls(
            lighting=config.get("lighting", default_instance.lighting),
            direction=tuple(config.get("direction", default_instance.direction)),
            ambient_color=tuple(config.get("ambient_color", default_instance.ambient_color))
        )
        model.strength()
        if not any(model.direction):
            raise ConfigurationError("Light direction cannot be the zero vector")
        return model


@dataclass
class ResolutionModel:
    """Model for resolution configuration."""
    # Resolution presets
    RESOLUTION_PRESETS = {
        "low": (640, 480),
        "medium": (1280, 720),
        "high": (1920, 1080)
    }

    width: int = 1280
    height: int = 720
    resolution_percentage: int = 100

    def to_dict(self) -> dict[str, Any]:
        """Convert the model to a dictionary format."""
        return {
            "width": self.width,
            "height": self.height,
            "resolution_percentage": self.resolution_percentage
        }

    @classmethod
    def from_dict(cls, config: dict[str, Any] | str) -> 'ResolutionModel':
        """Create a ResolutionModel from a dictionary or a preset name."""
        if isinstance(config, str):
            if config not in cls.RESOLUTION_PRESETS:
                raise ConfigurationError(
                    f"Invalid resolution preset: {config}. Must be one of {list(cls.RESOLUTION_PRESETS)}"
                )
            width, height = cls.RESOLUTION_PRESETS[config]
            return cls(width=width, height=height)
        if not isinstance(config, dict):
            config = {}

        default_instance = cls()
        return cls(
            width=int(config.get("width", default_instance.width)),
            height=int(config.get("height", default_instance.height)),
            resolution_percentage=int(config.get("resolution_percentage", default_instance.resolution_percentage))
        )


@dataclass
class RenderModel:
    """Model for render configuration."""
    engine: str = "CYCLES"
    samples: int = 32
    file_format: str = "PNG"
    resolution: ResolutionModel = field(default_factory=ResolutionModel)

    def to_dict(self) -> dict[str, Any]:
        """Convert the model to a dictionary format."""
        return {
            "engine": self.engine,
            "samples": self.samples,
            "file_format": self.file_format,
            "resolution": self.resolution.to_dict()
        }

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> 'RenderModel':
        """Create a RenderModel from a dictionary."""
        if not isinstance(config, dict):
            config = {}

        default_instance = cls()
        return cls(
            engine=config.get("engine", default_instance.engine),
            samples=int(config.get("samples", default_instance.samples)),
            file_format=config.get("file_format", default_instance.file_format),
            resolution=ResolutionModel.from_dict(config.get("resolution", {}))
        )


@dataclass
class LoopModel:
    """Model for the redraw loop and resize handling."""
    mode: LoopMode = LoopMode.INTERACTIVE
    fps: float = 60.0
    resize_debounce_ms: float = 200.0
    surface: str = "VIEW_3D"  # Area type the scene is drawn into
    output_path: str = "renders/chessboard.png"  # Used in still mode

    def to_dict(self) -> dict[str, Any]:
        """Convert the model to a dictionary format."""
        return {
            "mode": self.mode.value,
            "fps": self.fps,
            "resize_debounce_ms": self.resize_debounce_ms,
            "surface": self.surface,
            "output_path": self.output_path
        }

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> 'LoopModel':
        """Create a LoopModel from a dictionary."""
        if not isinstance(config, dict):
            config = {}

        default_instance = cls()
        try:
            mode = LoopMode(config.get("mode", default_instance.mode.value))
        except ValueError:
            raise ConfigurationError(
                f"Invalid loop mode: {config.get('mode')}. Must be one of {[m.value for m in LoopMode]}"
            ) from None

        model = cls(
            mode=mode,
            fps=float(config.get("fps", default_instance.fps)),
            resize_debounce_ms=float(config.get("resize_debounce_ms", default_instance.resize_debounce_ms)),
            surface=config.get("surface", default_instance.surface),
            output_path=config.get("output_path", default_instance.output_path)
        )
        if model.fps <= 0:
            raise ConfigurationError(f"fps must be positive, got {model.fps}")
        if model.resize_debounce_ms < 0:
            raise ConfigurationError(f"resize_debounce_ms cannot be negative, got {model.resize_debounce_ms}")
        return model
