"""Material evaluation for the automated opponent."""

from ..types import Player
from ..board import Board
from ..rules import MAN_VALUE, KING_VALUE


def material(board: Board, player: Player) -> int:
    """Material held by one player."""
    men, kings = board.count_pieces(player)
    return men * MAN_VALUE + kings * KING_VALUE


def evaluate(board: Board, perspective: Player) -> int:
    """
    Evaluate a board from the perspective of one player.

    Pure material count: positive is good for ``perspective``, negative is
    good for its opponent. There is no positional or mobility term.
    """
    return material(board, perspective) - material(board, perspective.opponent())
