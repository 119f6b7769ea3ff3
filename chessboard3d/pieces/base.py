from typing import TYPE_CHECKING, Any

from chessboard3d.scene_graph import CylinderShape, SceneNode, Vector3

from .recipes import BASE_DIAMETER, BASE_HEIGHT, recipe_for
from .types import PieceType

if TYPE_CHECKING:
    from chessboard3d.board import Board


class ChessPiece:
    """
    A chess piece built from primitive shapes.

    The piece is a base token parented to the board, with a body and a head
    parented to the base. All three share the piece material.
    """

    def __init__(self, piece_type: PieceType | str, material: Any, board: 'Board', name: str | None = None):
        """
        Build the piece nodes in the board's scene graph.

        Args:
            piece_type: Kind of piece (enum member or configuration name)
            material: Material reference shared by every part of the piece
            board: Board owning the piece
            name: Base name of the piece nodes (defaults to piece-<type>)
        """
        self._piece_type = PieceType.from_name(piece_type)
        self.material = material
        self.board = board
        self.x: int | None = None
        self.y: int | None = None

        graph = board.graph
        name = name or f"piece-{self._piece_type.value}"

        self.base = graph.add(
            name,
            CylinderShape(height=BASE_HEIGHT, diameter_top=BASE_DIAMETER, diameter_bottom=BASE_DIAMETER),
            material=material,
            position=Vector3(0.0, board.board_height * 2, 0.0),
            parent=board.node.index,
        )
        self.body, self.head = self._create_geometry(name)

    def _create_geometry(self, name: str) -> tuple[SceneNode, SceneNode]:
        recipe = recipe_for(self._piece_type)
        graph = self.board.graph

        body = graph.add(
            f"{name}-figure",
            recipe.body_shape(),
            material=self.material,
            position=Vector3(0.0, recipe.body_height / 2, 0.0),
            parent=self.base.index,
        )
        head = graph.add(
            f"{name}-head",
            recipe.head,
            material=self.material,
            position=Vector3(0.0, recipe.head_height, 0.0),
            parent=self.base.index,
        )
        return body, head

    @property
    def piece_type(self) -> PieceType:
        return self._piece_type

    @property
    def position(self) -> Vector3:
        """Position of the piece base in board space."""
        return self.base.position

    @property
    def mesh(self) -> SceneNode:
        return self.base

    def move(self, x: int, y: int) -> None:
        """
        Place the piece on board square (x, y).

        Only the horizontal position changes; the resting height is kept.
        Neither bounds nor occupancy are checked.
        """
        self.base.position.x = self.board.square_position(x)
        self.base.position.z = self.board.square_position(y)
        self.x = x
        self.y = y

    def __repr__(self) -> str:
        return f"ChessPiece({self._piece_type.value}, x={self.x}, y={self.y})"


def build_piece(piece_type: PieceType | str, material: Any, board: 'Board', name: str | None = None) -> ChessPiece:
    """
    Create a chess piece on the given board.

    Args:
        piece_type: Kind of piece
        material: Material shared by the base, body and head
        board: Board the piece belongs to
        name: Optional base name for the piece nodes

    Returns:
        The created piece, resting at the board origin until moved
    """
    return ChessPiece(piece_type, material, board, name=name)
