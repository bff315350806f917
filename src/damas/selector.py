"""Legal move selection: mandatory capture with longest-sequence precedence."""

from typing import List

from .types import Move, Player, Square
from .board import Board
from .movegen import generate_capture_sequences, generate_simple_moves


def select_best_captures(moves: List[Move]) -> List[Move]:
    """
    Keep only the capture sequences that take the most pieces, and among
    those, the ones that take the most kings.
    """
    if not moves:
        return []

    max_length = max(m.length for m in moves)
    candidates = [m for m in moves if m.length == max_length]

    max_kings = max(m.kings_captured for m in candidates)
    return [m for m in candidates if m.kings_captured == max_kings]


def legal_moves(board: Board, player: Player) -> List[Move]:
    """
    Generate all legal moves for a player.

    Capturing is mandatory: if any piece of the player can capture, only
    the longest sequences (then most kings captured) across all of the
    player's pieces are legal. Otherwise every simple move is legal.

    Returns:
        List of legal Move objects.
    """
    capture_moves = []
    for square, _ in board.get_pieces(player):
        capture_moves.extend(generate_capture_sequences(board, square))

    if capture_moves:
        return select_best_captures(capture_moves)

    simple_moves = []
    for square, _ in board.get_pieces(player):
        simple_moves.extend(generate_simple_moves(board, square))

    return simple_moves


def has_legal_moves(board: Board, player: Player) -> bool:
    """Check if a player has any legal moves."""
    # Quick check: does the player have any pieces?
    if not board.has_pieces(player):
        return False

    for square, _ in board.get_pieces(player):
        if generate_simple_moves(board, square):
            return True
        if generate_capture_sequences(board, square):
            return True

    return False


def moves_from(moves: List[Move], square: Square) -> List[Move]:
    """Filter a legal move list down to the moves of the piece on a square."""
    return [m for m in moves if m.start == square]
