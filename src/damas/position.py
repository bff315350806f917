"""Position: board plus side to move."""

from typing import Optional, List
from dataclasses import dataclass

from .types import Move, Player
from .board import Board
from .selector import legal_moves, has_legal_moves
from .applier import apply_move, resolve_continuations


@dataclass
class Position:
    """
    Complete game position including board and turn information.

    ``play`` returns a new position; the search relies on this so that
    sibling branches never share a board.
    """
    board: Board
    side_to_move: Player
    move_count: int = 0

    @classmethod
    def initial(cls) -> "Position":
        """Create the initial position. White moves first."""
        return cls(
            board=Board.initial(),
            side_to_move=Player.WHITE,
            move_count=0,
        )

    def clone(self) -> "Position":
        """Create a deep copy of this position."""
        return Position(self.board.clone(), self.side_to_move, self.move_count)

    def legal_moves(self) -> List[Move]:
        """Get all legal moves for the side to move."""
        return legal_moves(self.board, self.side_to_move)

    def play(self, move: Move) -> "Position":
        """
        Play a full turn and return the resulting position.

        Forced capture continuations are resolved before the turn passes.
        The original position is not modified.
        """
        new_board = self.board.clone()
        apply_move(new_board, move)
        resolve_continuations(new_board, move)

        return Position(
            board=new_board,
            side_to_move=self.side_to_move.opponent(),
            move_count=self.move_count + 1,
        )

    def is_terminal(self) -> bool:
        """Check if the game has ended."""
        return not has_legal_moves(self.board, self.side_to_move)

    def winner(self) -> Optional[Player]:
        """
        Get the winner of the game, or None if the game is not over.

        A side with no pieces or no legal move on its turn loses.
        """
        if not self.is_terminal():
            return None
        return self.side_to_move.opponent()

    def __str__(self) -> str:
        lines = [
            f"Turn: {self.side_to_move.name.title()} | Move #{self.move_count}",
            str(self.board),
        ]
        winner = self.winner()
        if winner is not None:
            lines.append(f"Game Over! Winner: {winner.name.title()}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Position(side={self.side_to_move.name}, move={self.move_count})"
