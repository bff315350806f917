"""Board representation for Spanish draughts."""

from typing import Optional, Dict, Iterator, Tuple

from .types import Piece, Player, PieceType, Square
from .rules import BOARD_SIZE, RED_ROWS, WHITE_ROWS, PROMOTION_ROW_WHITE, PROMOTION_ROW_RED


class Board:
    """
    8x8 board for Spanish draughts.

    Only dark squares are used: those where (row + col) % 2 == 1.
    Row 0 is the top; Red starts on rows 0-2, White on rows 5-7.
    """

    SIZE = BOARD_SIZE

    def __init__(self):
        """Create an empty board."""
        # Maps square (row, col) -> Piece
        self._pieces: Dict[Square, Piece] = {}

    def clone(self) -> "Board":
        """Create a deep copy of this board."""
        new_board = Board()
        # Pieces are frozen, so copying the mapping is a full value copy
        new_board._pieces = dict(self._pieces)
        return new_board

    @classmethod
    def initial(cls) -> "Board":
        """Create a board with the standard initial setup."""
        board = cls()

        for row in RED_ROWS:
            for col in range(cls.SIZE):
                if cls.is_playable(row, col):
                    board.set_piece((row, col), Piece(Player.RED, PieceType.MAN))

        for row in WHITE_ROWS:
            for col in range(cls.SIZE):
                if cls.is_playable(row, col):
                    board.set_piece((row, col), Piece(Player.WHITE, PieceType.MAN))

        return board

    @staticmethod
    def is_playable(row: int, col: int) -> bool:
        """Check if a square is a playable (dark) square."""
        return (row + col) % 2 == 1

    @staticmethod
    def in_bounds(row: int, col: int) -> bool:
        """Check if a square is within the board."""
        return 0 <= row < Board.SIZE and 0 <= col < Board.SIZE

    def get_piece(self, square: Square) -> Optional[Piece]:
        """Get the piece on a square, or None if empty or off the board."""
        return self._pieces.get(square)

    def set_piece(self, square: Square, piece: Optional[Piece]) -> None:
        """Set or remove a piece on a square."""
        if not Board.in_bounds(*square):
            raise ValueError(f"Square {square} is off the board")
        if piece is None:
            self._pieces.pop(square, None)
        else:
            self._pieces[square] = piece

    def remove_piece(self, square: Square) -> Optional[Piece]:
        """Remove and return the piece on a square."""
        return self._pieces.pop(square, None)

    def get_pieces(self, player: Optional[Player] = None) -> Iterator[Tuple[Square, Piece]]:
        """
        Iterate over all pieces, optionally filtered by player.

        Pieces are yielded in row-major order so that move generation is
        deterministic regardless of insertion history.
        """
        for square in sorted(self._pieces):
            piece = self._pieces[square]
            if player is None or piece.player == player:
                yield square, piece

    def count_pieces(self, player: Player) -> Tuple[int, int]:
        """Count (men, kings) for a player."""
        men = 0
        kings = 0
        for _, piece in self.get_pieces(player):
            if piece.is_king:
                kings += 1
            else:
                men += 1
        return men, kings

    def is_empty(self, square: Square) -> bool:
        """Check if a square is empty."""
        return square not in self._pieces

    def has_pieces(self, player: Player) -> bool:
        """Check if a player has any pieces on the board."""
        return any(p.player == player for p in self._pieces.values())

    @staticmethod
    def promotion_row(player: Player) -> int:
        """Get the promotion row for a player."""
        return PROMOTION_ROW_WHITE if player == Player.WHITE else PROMOTION_ROW_RED

    @classmethod
    def from_compact(cls, data: dict) -> "Board":
        """Create a board from compact format."""
        board = cls()

        for square in data.get("white_men", []):
            board.set_piece(tuple(square), Piece(Player.WHITE, PieceType.MAN))
        for square in data.get("white_kings", []):
            board.set_piece(tuple(square), Piece(Player.WHITE, PieceType.KING))
        for square in data.get("red_men", []):
            board.set_piece(tuple(square), Piece(Player.RED, PieceType.MAN))
        for square in data.get("red_kings", []):
            board.set_piece(tuple(square), Piece(Player.RED, PieceType.KING))

        return board

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._pieces == other._pieces

    def __str__(self) -> str:
        """String representation of the board."""
        lines = []
        lines.append("  0 1 2 3 4 5 6 7")
        for row in range(self.SIZE):
            row_str = f"{row} "
            for col in range(self.SIZE):
                piece = self.get_piece((row, col))
                if piece is None:
                    row_str += ". " if self.is_playable(row, col) else "  "
                elif piece.player == Player.WHITE:
                    row_str += "W " if piece.is_king else "w "
                else:
                    row_str += "R " if piece.is_king else "r "
            lines.append(row_str.rstrip())
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Board({len(self._pieces)} pieces)"
