from .base import ChessPiece, build_piece
from .recipes import SHAPE_RECIPES, ShapeRecipe, recipe_for
from .types import PieceColor, PieceType

__all__ = [
    'ChessPiece',
    'build_piece',
    'PieceType',
    'PieceColor',
    'ShapeRecipe',
    'SHAPE_RECIPES',
    'recipe_for'
]
