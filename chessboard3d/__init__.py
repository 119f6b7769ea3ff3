"""
3D chessboard scene construction.

The board, pieces and starting layout are built into an engine-independent
scene graph; the scene_setup package realizes that graph in Blender.
"""

from .board import Board, Cell, ChessBoard, build_board
from .layout import STARTING_LAYOUT, populate_starting_position, starting_squares
from .pieces import ChessPiece, PieceColor, PieceType, build_piece
from .scene_graph import SceneGraph

__all__ = [
    "Board",
    "Cell",
    "ChessBoard",
    "build_board",
    "ChessPiece",
    "PieceColor",
    "PieceType",
    "build_piece",
    "STARTING_LAYOUT",
    "starting_squares",
    "populate_starting_position",
    "SceneGraph"
]
