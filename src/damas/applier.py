"""Move application, promotion and forced capture continuation."""

from dataclasses import dataclass
from typing import List

from .types import Move, Square
from .board import Board
from .errors import InvariantError
from .movegen import generate_capture_sequences
from .selector import select_best_captures


@dataclass(frozen=True)
class MoveOutcome:
    """What happened when a move was committed."""
    captured_count: int
    kings_captured: int
    promoted: bool


def apply_move(board: Board, move: Move) -> MoveOutcome:
    """
    Apply a move to a board in place.

    The piece is relocated, every captured piece is removed and a man
    landing on its promotion row becomes a king.

    Raises:
        InvariantError: If the move does not match the board.
    """
    piece = board.get_piece(move.start)
    if piece is None:
        raise InvariantError(f"No piece at {move.start} for {move!r}")

    kings_captured = 0
    for captured in move.captures:
        victim = board.get_piece(captured.square)
        if victim is None:
            raise InvariantError(f"Captured square {captured.square} is already empty")
        if victim.player == piece.player:
            raise InvariantError(f"Move {move!r} captures a friendly piece at {captured.square}")
        if victim.is_king:
            kings_captured += 1

    # A flying king may finish on a square it captured from earlier in the chain
    if (move.end != move.start
            and move.end not in move.captured_squares
            and not board.is_empty(move.end)):
        raise InvariantError(f"Landing square {move.end} is occupied for {move!r}")

    for captured in move.captures:
        board.remove_piece(captured.square)

    board.remove_piece(move.start)

    promoted = not piece.is_king and move.end[0] == Board.promotion_row(piece.player)
    if promoted:
        piece = piece.promote()

    board.set_piece(move.end, piece)

    return MoveOutcome(
        captured_count=len(move.captures),
        kings_captured=kings_captured,
        promoted=promoted,
    )


def continuation_moves(board: Board, square: Square) -> List[Move]:
    """
    Capture sequences the piece on a landing square must continue with.

    Only the longest sequences (then most kings captured) are returned.
    """
    return select_best_captures(generate_capture_sequences(board, square))


def pick_continuation(moves: List[Move]) -> Move:
    """
    Deterministic choice among equally good continuations.

    Lowest landing square first, then lowest captured squares.
    """
    return min(moves, key=lambda m: (m.end, m.captured_squares))


def resolve_continuations(board: Board, move: Move) -> List[Move]:
    """
    Apply forced continuations after a capture until none remain.

    Args:
        board: Board the capturing move has already been applied to.
        move: The move that was just applied.

    Returns:
        The continuation moves applied, in order.
    """
    applied: List[Move] = []
    if not move.is_capture:
        return applied

    square = move.end
    while True:
        options = continuation_moves(board, square)
        if not options:
            break
        choice = pick_continuation(options)
        apply_move(board, choice)
        applied.append(choice)
        square = choice.end

    return applied
