"""Move generation for Spanish draughts."""

import logging
from typing import List, Tuple

from .types import Move, Player, Square, Piece, CapturedPiece
from .board import Board
from .rules import FORWARD_DIRECTIONS_WHITE, FORWARD_DIRECTIONS_RED, ALL_DIRECTIONS

logger = logging.getLogger(__name__)


def get_forward_directions(player: Player) -> List[Tuple[int, int]]:
    """Get the forward diagonal directions for a player."""
    return FORWARD_DIRECTIONS_WHITE if player == Player.WHITE else FORWARD_DIRECTIONS_RED


def get_move_directions(piece: Piece) -> List[Tuple[int, int]]:
    """Get all valid move and capture directions for a piece."""
    if piece.is_king:
        return ALL_DIRECTIONS
    return get_forward_directions(piece.player)


def generate_simple_moves(board: Board, square: Square) -> List[Move]:
    """Generate non-capture moves for the piece on a square."""
    piece = board.get_piece(square)
    if piece is None:
        return []

    moves = []
    row, col = square

    for dr, dc in get_move_directions(piece):
        if piece.is_king:
            # Flying king: every empty square along the diagonal run
            distance = 1
            while True:
                new_row, new_col = row + distance * dr, col + distance * dc
                new_square = (new_row, new_col)

                if not Board.in_bounds(new_row, new_col):
                    break
                if not board.is_empty(new_square):
                    break

                moves.append(Move(path=(square, new_square)))
                distance += 1
        else:
            # Man: one square forward
            new_row, new_col = row + dr, col + dc
            new_square = (new_row, new_col)

            if Board.in_bounds(new_row, new_col) and board.is_empty(new_square):
                moves.append(Move(path=(square, new_square)))

    return moves


def _jump(board: Board, square: Square, captured: Square, land: Square) -> Board:
    """Return a scratch board with one capture hop applied."""
    temp_board = board.clone()
    piece = temp_board.remove_piece(square)
    temp_board.remove_piece(captured)
    temp_board.set_piece(land, piece)
    return temp_board


def _man_hops(board: Board, square: Square, piece: Piece) -> List[Tuple[Square, Square]]:
    """Single capture hops for a man as (captured, landing) pairs."""
    row, col = square
    hops = []

    for dr, dc in get_forward_directions(piece.player):
        captured = (row + dr, col + dc)
        land_row, land_col = row + 2 * dr, col + 2 * dc
        land = (land_row, land_col)

        if not Board.in_bounds(land_row, land_col):
            continue

        victim = board.get_piece(captured)
        if victim is None or victim.player == piece.player:
            continue
        if not board.is_empty(land):
            continue

        hops.append((captured, land))

    return hops


def _king_hops(board: Board, square: Square, piece: Piece) -> List[Tuple[Square, Square]]:
    """
    Single capture hops for a flying king as (captured, landing) pairs.

    A king scans along each diagonal across empty squares to the first
    occupied square. If that piece is an enemy, every empty square beyond
    it (up to the next occupied square or the edge) is a landing square.
    """
    row, col = square
    hops = []

    for dr, dc in ALL_DIRECTIONS:
        distance = 1
        while True:
            scan_row, scan_col = row + distance * dr, col + distance * dc
            if not Board.in_bounds(scan_row, scan_col) or not board.is_empty((scan_row, scan_col)):
                break
            distance += 1

        if not Board.in_bounds(scan_row, scan_col):
            continue

        scanned = (scan_row, scan_col)
        victim = board.get_piece(scanned)
        if victim.player == piece.player:
            # Friendly piece blocks the diagonal
            continue

        land_distance = 1
        while True:
            land_row = scan_row + land_distance * dr
            land_col = scan_col + land_distance * dc
            land = (land_row, land_col)

            if not Board.in_bounds(land_row, land_col) or not board.is_empty(land):
                break

            hops.append((scanned, land))
            land_distance += 1

    return hops


def _extend_sequences(
    board: Board,
    square: Square,
    piece: Piece,
    path: Tuple[Square, ...],
    captures: Tuple[CapturedPiece, ...],
    sequences: List[Move],
) -> bool:
    """
    Depth-first search for capture chains from a square.

    Every hop is tried on a scratch board with the captured piece removed.
    A chain is recorded only when its landing square offers no further
    capture, so only maximal sequences reach ``sequences``.

    Returns:
        True if at least one capture was available from ``square``.
    """
    hops = _king_hops(board, square, piece) if piece.is_king else _man_hops(board, square, piece)

    for captured, land in hops:
        victim = board.get_piece(captured)
        new_path = path + (land,)
        new_captures = captures + (CapturedPiece(captured, victim.is_king),)

        temp_board = _jump(board, square, captured, land)
        continued = _extend_sequences(temp_board, land, piece, new_path, new_captures, sequences)

        if not continued:
            sequences.append(Move(path=new_path, captures=new_captures))

    return len(hops) > 0


def generate_capture_sequences(board: Board, square: Square) -> List[Move]:
    """
    Generate every maximal capture sequence for the piece on a square.

    The piece keeps its rank for the whole chain; promotion is only
    applied once the move is committed.

    Returns:
        List of capture moves, each a maximal chain. Empty if the square
        is empty or the piece has no capture.
    """
    piece = board.get_piece(square)
    if piece is None:
        return []

    sequences: List[Move] = []
    _extend_sequences(board, square, piece, (square,), (), sequences)
    return sequences
