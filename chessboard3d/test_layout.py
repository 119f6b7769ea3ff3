"""Unit tests for chessboard3d/layout.py"""

from collections import Counter

import pytest

from chessboard3d.board import build_board
from chessboard3d.layout import STARTING_LAYOUT, populate_starting_position, starting_squares
from chessboard3d.pieces import PieceColor, PieceType

BACK_RANK = [
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.KING,
    PieceType.QUEEN,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
]


@pytest.fixture
def board():
    return build_board(8, 1, 0.2, "black", "white")


def test_layout_is_back_rank_then_pawns() -> None:
    assert list(STARTING_LAYOUT[:8]) == BACK_RANK
    assert list(STARTING_LAYOUT[8:]) == [PieceType.PAWN] * 8


def test_starting_squares_are_distinct_and_on_board() -> None:
    squares = starting_squares()
    assert len(squares) == 32
    coordinates = {(s.x, s.y) for s in squares}
    assert len(coordinates) == 32
    assert all(0 <= x < 8 and 0 <= y < 8 for x, y in coordinates)


@pytest.mark.parametrize("color, back_row, pawn_row", [(PieceColor.DARK, 0, 1), (PieceColor.LIGHT, 7, 6)])
def test_each_side_has_standard_ranks(color: PieceColor, back_row: int, pawn_row: int) -> None:
    squares = [s for s in starting_squares() if s.color == color]
    assert len(squares) == 16
    by_square = {(s.x, s.y): s.piece_type for s in squares}
    assert [by_square[(x, back_row)] for x in range(8)] == BACK_RANK
    assert [by_square[(x, pawn_row)] for x in range(8)] == [PieceType.PAWN] * 8


def test_sides_mirror_each_other() -> None:
    squares = starting_squares()
    dark = {(s.x, s.y): s.piece_type for s in squares if s.color == PieceColor.DARK}
    light = {(s.x, s.y): s.piece_type for s in squares if s.color == PieceColor.LIGHT}
    assert all(light[(x, 7 - y)] == piece_type for (x, y), piece_type in dark.items())


def test_larger_board_uses_its_last_rows() -> None:
    squares = starting_squares(10)
    light_rows = {s.y for s in squares if s.color == PieceColor.LIGHT}
    assert light_rows == {8, 9}


def test_starting_position_needs_eight_columns() -> None:
    with pytest.raises(ValueError):
        starting_squares(7)


def test_layout_must_cover_two_ranks() -> None:
    with pytest.raises(ValueError):
        starting_squares(8, STARTING_LAYOUT[:8])


def test_populate_places_32_pieces(board) -> None:
    pieces = populate_starting_position(board, "black-piece", "white-piece")
    assert len(pieces) == 32
    assert len({(p.x, p.y) for p in pieces}) == 32

    counts = Counter(p.piece_type for p in pieces)
    assert counts == {
        PieceType.PAWN: 16,
        PieceType.ROOK: 4,
        PieceType.KNIGHT: 4,
        PieceType.BISHOP: 4,
        PieceType.KING: 2,
        PieceType.QUEEN: 2,
    }


def test_populate_uses_side_materials(board) -> None:
    pieces = populate_starting_position(board, "black-piece", "white-piece")
    for piece in pieces:
        expected = "black-piece" if piece.y in (0, 1) else "white-piece"
        assert piece.material == expected
        assert piece.head.material == expected


def test_populated_pieces_sit_on_their_cells(board) -> None:
    pieces = populate_starting_position(board, "black-piece", "white-piece")
    for piece in pieces:
        cell = board.cell(piece.x, piece.y)
        assert piece.position.x == cell.position.x
        assert piece.position.z == cell.position.z
        assert piece.position.y == pytest.approx(0.4)
        assert piece.base.parent == board.node.index


def test_populate_adds_three_nodes_per_piece(board) -> None:
    populate_starting_position(board, "black-piece", "white-piece")
    assert len(board.graph) == 1 + 64 + 32 * 3
    names = [node.name for node in board.graph]
    assert len(set(names)) == len(names)
    assert "dark-king-3-0" in names
    assert "light-queen-4-7" in names
