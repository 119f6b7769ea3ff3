"""Geometry recipes for the procedurally built chess pieces."""

from dataclasses import dataclass

from chessboard3d.scene_graph import CylinderShape, Shape, SphereShape

from .types import PieceType

# Base token shared by every piece
BASE_DIAMETER = 0.6
BASE_HEIGHT = 0.2

HEAD_SPHERE = SphereShape(diameter=0.3, segments=8)


@dataclass(frozen=True)
class ShapeRecipe:
    """Body and head geometry of one piece type."""
    body_height: float
    body_diameter_top: float
    body_diameter_bottom: float
    head: Shape
    head_offset: float = 0.0  # Extra lift above the body top

    def body_shape(self) -> CylinderShape:
        return CylinderShape(
            height=self.body_height,
            diameter_top=self.body_diameter_top,
            diameter_bottom=self.body_diameter_bottom,
        )

    @property
    def head_height(self) -> float:
        """Height of the head centre above the base."""
        return self.body_height + self.head_offset


SHAPE_RECIPES: dict[PieceType, ShapeRecipe] = {
    PieceType.KING: ShapeRecipe(1.0, 0.2, 0.5, HEAD_SPHERE),
    PieceType.QUEEN: ShapeRecipe(1.0, 0.1, 0.5, HEAD_SPHERE),
    PieceType.BISHOP: ShapeRecipe(
        0.7, 0.2, 0.5,
        CylinderShape(height=0.4, diameter_top=0.0, diameter_bottom=0.3),
        head_offset=0.2,
    ),
    PieceType.KNIGHT: ShapeRecipe(0.8, 0.1, 0.5, HEAD_SPHERE),
    PieceType.ROOK: ShapeRecipe(
        0.7, 0.3, 0.5,
        CylinderShape(height=0.2, diameter_top=0.4, diameter_bottom=0.4),
    ),
    PieceType.PAWN: ShapeRecipe(0.6, 0.1, 0.5, HEAD_SPHERE),
}


def recipe_for(piece_type: PieceType | str) -> ShapeRecipe:
    """Look up the recipe of a piece type (or piece type name)."""
    return SHAPE_RECIPES[PieceType.from_name(piece_type)]
