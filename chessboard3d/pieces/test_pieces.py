"""Unit tests for the piece builder in chessboard3d/pieces"""

import pytest

from chessboard3d.board import build_board
from chessboard3d.pieces import SHAPE_RECIPES, ChessPiece, PieceType, build_piece, recipe_for
from chessboard3d.scene_graph import CylinderShape, SphereShape

MATERIAL = "piece-material"

# (type, body height, body top diameter, head centre height, head shape)
EXPECTED_RECIPES = [
    (PieceType.KING, 1.0, 0.2, 1.0, SphereShape(0.3, 8)),
    (PieceType.QUEEN, 1.0, 0.1, 1.0, SphereShape(0.3, 8)),
    (PieceType.BISHOP, 0.7, 0.2, 0.9, CylinderShape(0.4, 0.0, 0.3)),
    (PieceType.KNIGHT, 0.8, 0.1, 0.8, SphereShape(0.3, 8)),
    (PieceType.ROOK, 0.7, 0.3, 0.7, CylinderShape(0.2, 0.4, 0.4)),
    (PieceType.PAWN, 0.6, 0.1, 0.6, SphereShape(0.3, 8)),
]


@pytest.fixture
def board():
    return build_board(8, 1, 0.2, "dark", "light")


def test_every_piece_type_has_a_recipe() -> None:
    assert set(SHAPE_RECIPES) == set(PieceType)


@pytest.mark.parametrize("piece_type, body_height, body_top, head_height, head_shape", EXPECTED_RECIPES)
def test_piece_geometry(board, piece_type, body_height, body_top, head_height, head_shape) -> None:
    piece = build_piece(piece_type, MATERIAL, board)

    assert piece.body.shape == CylinderShape(height=body_height, diameter_top=body_top, diameter_bottom=0.5)
    assert piece.body.position.y == pytest.approx(body_height / 2)
    assert piece.head.shape == head_shape
    assert piece.head.position.y == pytest.approx(head_height)


@pytest.mark.parametrize("piece_type", list(PieceType))
def test_piece_hierarchy_and_material(board, piece_type: PieceType) -> None:
    piece = build_piece(piece_type, MATERIAL, board)
    graph = board.graph

    assert piece.base.parent == board.node.index
    assert piece.base.shape == CylinderShape(height=0.2, diameter_top=0.6, diameter_bottom=0.6)
    assert graph.children(piece.base.index) == [piece.body, piece.head]
    assert {node.material for node in (piece.base, piece.body, piece.head)} == {MATERIAL}
    assert piece.mesh is piece.base


def test_piece_rests_on_the_board(board) -> None:
    piece = build_piece(PieceType.KING, MATERIAL, board)
    assert piece.position.as_tuple() == (0.0, 0.4, 0.0)
    assert (piece.x, piece.y) == (None, None)


def test_piece_type_is_read_only(board) -> None:
    piece = build_piece("queen", MATERIAL, board)
    assert piece.piece_type is PieceType.QUEEN
    with pytest.raises(AttributeError):
        piece.piece_type = PieceType.KING


@pytest.mark.parametrize("x, y", [(0, 0), (7, 7), (3, 6), (4, 1)])
def test_move_uses_cell_centring(board, x: int, y: int) -> None:
    piece = build_piece(PieceType.PAWN, MATERIAL, board)
    piece.move(x, y)
    assert piece.position.as_tuple() == (x - 3.5, 0.4, y - 3.5)
    assert (piece.x, piece.y) == (x, y)
    # Same centre as the cell underneath
    cell = board.cell(x, y)
    assert (piece.position.x, piece.position.z) == (cell.position.x, cell.position.z)


def test_move_is_idempotent_and_history_independent(board) -> None:
    piece = build_piece(PieceType.ROOK, MATERIAL, board)
    piece.move(2, 5)
    first = piece.position.as_tuple()
    piece.move(2, 5)
    assert piece.position.as_tuple() == first

    other = build_piece(PieceType.ROOK, MATERIAL, board)
    piece.move(6, 1)
    other.move(6, 1)
    assert piece.position.as_tuple() == other.position.as_tuple()


def test_move_does_not_validate_squares(board) -> None:
    piece = build_piece(PieceType.KNIGHT, MATERIAL, board)
    piece.move(10, -1)
    assert piece.position.as_tuple() == (6.5, 0.4, -4.5)

    other = build_piece(PieceType.KNIGHT, MATERIAL, board)
    other.move(10, -1)
    assert other.position.as_tuple() == piece.position.as_tuple()


def test_move_does_not_touch_sub_shapes(board) -> None:
    piece = build_piece(PieceType.BISHOP, MATERIAL, board)
    piece.move(5, 5)
    assert (piece.body.position.x, piece.body.position.z) == (0.0, 0.0)
    assert board.graph.world_position(piece.head.index).x == 1.5


def test_piece_on_larger_cells() -> None:
    big_board = build_board(8, 2.0, 0.5, "dark", "light")
    piece = ChessPiece(PieceType.KING, MATERIAL, big_board)
    piece.move(0, 7)
    # x * cell_size - (cells_count - 1) / 2
    assert piece.position.as_tuple() == (-3.5, 1.0, 10.5)


@pytest.mark.parametrize("name", ["King", " pawn ", "ROOK"])
def test_piece_type_names_are_case_insensitive(name: str) -> None:
    assert recipe_for(name) is SHAPE_RECIPES[PieceType.from_name(name)]


@pytest.mark.parametrize("name", ["rock", "", "emperor"])
def test_unknown_piece_type_is_rejected(board, name: str) -> None:
    with pytest.raises(ValueError):
        PieceType.from_name(name)
    with pytest.raises(ValueError):
        build_piece(name, MATERIAL, board)
