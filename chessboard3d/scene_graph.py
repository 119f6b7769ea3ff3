"""
Engine-independent scene graph.

Nodes are stored in an arena (a flat list) and refer to their parent by index,
so a parent always precedes its children. Positions are local to the parent and
use a y-up convention; the Blender realizer maps them to z-up.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Vector3:
    """Mutable 3D position (y is up)."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __add__(self, other: 'Vector3') -> 'Vector3':
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)


@dataclass(frozen=True)
class BoxShape:
    """Axis-aligned box centred on its node position."""
    width: float
    depth: float
    height: float


@dataclass(frozen=True)
class CylinderShape:
    """Vertical cylinder; different diameters give a tapered body, a zero top gives a cone."""
    height: float
    diameter_top: float
    diameter_bottom: float
    tessellation: int = 24


@dataclass(frozen=True)
class SphereShape:
    diameter: float
    segments: int = 8


Shape = BoxShape | CylinderShape | SphereShape


@dataclass
class SceneNode:
    """A single mesh in the scene graph."""
    index: int
    name: str
    shape: Shape
    material: Any = None
    position: Vector3 = field(default_factory=Vector3)
    parent: int | None = None


class SceneGraph:
    """Arena of scene nodes forming an owning tree."""

    def __init__(self):
        self.nodes: list[SceneNode] = []

    def add(
        self,
        name: str,
        shape: Shape,
        material: Any = None,
        position: Vector3 | None = None,
        parent: int | None = None,
    ) -> SceneNode:
        """
        Append a node to the arena.

        Args:
            name: Node name (used as the object name when realized)
            shape: Geometry of the node
            material: Opaque material reference, never inspected here
            position: Position relative to the parent (origin if omitted)
            parent: Arena index of the parent node, or None for a root

        Returns:
            The created node

        Raises:
            ValueError: If the parent index is not already in the arena
        """
        if parent is not None and not 0 <= parent < len(self.nodes):
            raise ValueError(f"Unknown parent node index: {parent}")

        node = SceneNode(
            index=len(self.nodes),
            name=name,
            shape=shape,
            material=material,
            position=position if position is not None else Vector3(),
            parent=parent,
        )
        self.nodes.append(node)
        return node

    def node(self, index: int) -> SceneNode:
        return self.nodes[index]

    def children(self, index: int) -> list[SceneNode]:
        return [node for node in self.nodes if node.parent == index]

    def descendants(self, index: int) -> list[SceneNode]:
        """All nodes below `index`, in arena order."""
        found = {index}
        result = []
        # Children always come after their parent, so one forward pass is enough
        for node in self.nodes[index + 1:]:
            if node.parent in found:
                found.add(node.index)
                result.append(node)
        return result

    def roots(self) -> list[SceneNode]:
        return [node for node in self.nodes if node.parent is None]

    def world_position(self, index: int) -> Vector3:
        node = self.nodes[index]
        position = Vector3(*node.position.as_tuple())
        while node.parent is not None:
            node = self.nodes[node.parent]
            position = position + node.position
        return position

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[SceneNode]:
        return iter(self.nodes)
