"""Type definitions for Spanish draughts."""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Tuple


class Player(IntEnum):
    """Player identifiers."""
    WHITE = 1  # Starts on rows 5-7, moves upward (decreasing row), moves first
    RED = 2    # Starts on rows 0-2, moves downward (increasing row)

    def opponent(self) -> "Player":
        """Return the opposing player."""
        return Player.RED if self == Player.WHITE else Player.WHITE


class PieceType(Enum):
    """Types of pieces."""
    MAN = "man"
    KING = "king"


@dataclass(frozen=True)
class Piece:
    """A game piece on the board."""
    player: Player
    piece_type: PieceType = PieceType.MAN

    @property
    def is_king(self) -> bool:
        """Check if this piece is a king."""
        return self.piece_type == PieceType.KING

    def promote(self) -> "Piece":
        """Return a promoted (king) version of this piece."""
        return Piece(self.player, PieceType.KING)


# Type alias for board coordinates: (row, col)
Square = Tuple[int, int]


@dataclass(frozen=True)
class CapturedPiece:
    """One piece removed along a capture chain."""
    square: Square
    was_king: bool = False


@dataclass(frozen=True)
class Move:
    """
    Represents a move in Spanish draughts.

    Attributes:
        path: Squares from start to end. A simple move has len(path) == 2;
              a chain of n captures has len(path) == n + 1.
        captures: Pieces removed by this move, in capture order.
    """
    path: Tuple[Square, ...]
    captures: Tuple[CapturedPiece, ...] = ()

    @property
    def start(self) -> Square:
        """Starting square of the move."""
        return self.path[0]

    @property
    def end(self) -> Square:
        """Landing square of the move."""
        return self.path[-1]

    @property
    def is_capture(self) -> bool:
        """Check if this move involves any captures."""
        return len(self.captures) > 0

    @property
    def length(self) -> int:
        """Number of pieces captured in this move."""
        return len(self.captures)

    @property
    def kings_captured(self) -> int:
        """Number of captured pieces that were kings."""
        return sum(1 for c in self.captures if c.was_king)

    @property
    def captured_squares(self) -> Tuple[Square, ...]:
        return tuple(c.square for c in self.captures)

    def __repr__(self) -> str:
        path_str = "->".join(f"({r},{c})" for r, c in self.path)
        if self.captures:
            return f"Move({path_str}, captures={self.length}, kings={self.kings_captured})"
        return f"Move({path_str})"
