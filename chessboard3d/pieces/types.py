from enum import Enum


class PieceType(Enum):
    """Kind of chess piece."""
    KING = "king"
    QUEEN = "queen"
    ROOK = "rook"
    BISHOP = "bishop"
    KNIGHT = "knight"
    PAWN = "pawn"

    @classmethod
    def from_name(cls, name: 'str | PieceType') -> 'PieceType':
        """
        Parse a piece type from its configuration name.

        Raises:
            ValueError: If the name is not a known piece type
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown piece type '{name}'. Must be one of {[t.value for t in cls]}"
            ) from None


class PieceColor(Enum):
    """Side a piece belongs to."""
    DARK = "dark"
    LIGHT = "light"
