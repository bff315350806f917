"""
Spanish draughts rules engine with an automated opponent.

Rules: mandatory capture, men move and capture forward only, flying kings,
and the longest capture sequence (then the one taking most kings) must be
played.

Modules:
    types      - Player, Piece, Move and capture records
    board      - 8x8 board
    movegen    - per-piece capture chains and simple moves
    selector   - global mandatory-capture / longest-sequence filter
    applier    - move application, promotion, forced continuation
    position   - board plus side to move
    ai         - material evaluation, alpha-beta search, difficulty policies
    engine     - turn orchestration and front-end callbacks
    config     - YAML-backed settings
"""

from .types import Player, PieceType, Piece, CapturedPiece, Move, Square
from .board import Board
from .position import Position
from .selector import legal_moves
from .applier import apply_move, MoveOutcome
from .engine import Engine, Cue, SelectionOutcome, GameResult
from .ai import Difficulty, choose_move, find_best_move

__version__ = "1.0.0"

__all__ = [
    'Player',
    'PieceType',
    'Piece',
    'CapturedPiece',
    'Move',
    'Square',
    'Board',
    'Position',
    'legal_moves',
    'apply_move',
    'MoveOutcome',
    'Engine',
    'Cue',
    'SelectionOutcome',
    'GameResult',
    'Difficulty',
    'choose_move',
    'find_best_move',
]
