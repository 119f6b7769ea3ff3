import logging
from typing import Any, NamedTuple

from .board import Board
from .pieces import ChessPiece, PieceColor, PieceType, build_piece

logger = logging.getLogger(__name__)

# One side's back rank followed by its pawn rank
STARTING_LAYOUT: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.KING,
    PieceType.QUEEN,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
) + (PieceType.PAWN,) * 8

RANK_WIDTH = 8


class StartingSquare(NamedTuple):
    piece_type: PieceType
    color: PieceColor
    x: int
    y: int


def starting_squares(
    cells_count: int = 8,
    layout: tuple[PieceType, ...] | list[PieceType] = STARTING_LAYOUT,
) -> list[StartingSquare]:
    """
    Compute the starting square of every piece.

    Entry i of the layout goes to column i % 8. Dark pieces take row 0 (back
    rank) and row 1 (pawns); light pieces are mirrored front-to-back onto the
    last two rows.

    Raises:
        ValueError: If the board is narrower than a rank or the layout is not two ranks long
    """
    if cells_count < RANK_WIDTH:
        raise ValueError(f"A starting position needs at least {RANK_WIDTH} cells per side, got {cells_count}")
    if len(layout) != 2 * RANK_WIDTH:
        raise ValueError(f"Layout must have {2 * RANK_WIDTH} entries, got {len(layout)}")

    last_row = cells_count - 1
    squares = []
    for i, piece_type in enumerate(layout):
        x = i % RANK_WIDTH
        is_pawn_rank = i >= RANK_WIDTH
        squares.append(StartingSquare(piece_type, PieceColor.DARK, x, 1 if is_pawn_rank else 0))
        squares.append(StartingSquare(piece_type, PieceColor.LIGHT, x, last_row - 1 if is_pawn_rank else last_row))
    return squares


def populate_starting_position(
    board: Board,
    dark_material: Any,
    light_material: Any,
    layout: tuple[PieceType, ...] | list[PieceType] | None = None,
) -> list[ChessPiece]:
    """
    Create both sides' pieces on the board and move each onto its starting square.

    Returns:
        The created pieces, dark and light interleaved in layout order
    """
    materials = {PieceColor.DARK: dark_material, PieceColor.LIGHT: light_material}
    pieces = []
    for square in starting_squares(board.cells_count, layout or STARTING_LAYOUT):
        piece = build_piece(
            square.piece_type,
            materials[square.color],
            board,
            name=f"{square.color.value}-{square.piece_type.value}-{square.x}-{square.y}",
        )
        piece.move(square.x, square.y)
        pieces.append(piece)

    logger.info(f"Placed {len(pieces)} pieces on the board")
    return pieces
