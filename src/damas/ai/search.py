"""Fixed-depth minimax search with alpha-beta pruning."""

import logging
from dataclasses import dataclass
from typing import Optional

from ..types import Move, Player
from ..position import Position
from .eval import evaluate

logger = logging.getLogger(__name__)


@dataclass
class SearchStats:
    """Counters collected during one search."""
    nodes: int = 0
    cutoffs: int = 0


@dataclass
class SearchResult:
    """Result of a search."""
    move: Optional[Move]
    score: float
    depth: int
    nodes: int


def minimax(
    position: Position,
    depth: int,
    alpha: float,
    beta: float,
    maximizing: bool,
    perspective: Player,
    stats: Optional[SearchStats] = None,
    prune: bool = True,
) -> float:
    """
    Minimax search with alpha-beta pruning.

    Args:
        position: Position to search. Never modified; children are built
            with ``Position.play``, which also plays out forced captures.
        depth: Remaining plies to search.
        alpha: Best score the maximizer can already guarantee.
        beta: Best score the minimizer can already guarantee.
        maximizing: True if ``perspective`` is the side to move.
        perspective: Player the evaluation is signed for.
        stats: Optional counters, updated in place.
        prune: If False, every branch is searched (plain minimax).

    Returns:
        Material score of the position, from ``perspective``.
    """
    if stats is not None:
        stats.nodes += 1

    if depth == 0:
        return evaluate(position.board, perspective)

    moves = position.legal_moves()
    if not moves:
        return evaluate(position.board, perspective)

    if maximizing:
        best_score = float('-inf')
        for move in moves:
            score = minimax(position.play(move), depth - 1, alpha, beta,
                            False, perspective, stats, prune)
            best_score = max(best_score, score)
            alpha = max(alpha, score)

            if prune and beta <= alpha:
                if stats is not None:
                    stats.cutoffs += 1
                break  # Beta cutoff
        return best_score

    best_score = float('inf')
    for move in moves:
        score = minimax(position.play(move), depth - 1, alpha, beta,
                        True, perspective, stats, prune)
        best_score = min(best_score, score)
        beta = min(beta, score)

        if prune and beta <= alpha:
            if stats is not None:
                stats.cutoffs += 1
            break  # Alpha cutoff
    return best_score


def find_best_move(position: Position, depth: int, prune: bool = True) -> SearchResult:
    """
    Find the best move for the side to move.

    Every root move is searched with a full window at ``depth - 1``. The
    move with the strictly greatest score wins, so ties go to the move
    generated first.

    Returns:
        SearchResult. ``move`` is None if the side to move has no legal move.

    Raises:
        ValueError: If depth is less than 1.
    """
    if depth < 1:
        raise ValueError(f"Search depth must be at least 1, got {depth}")

    perspective = position.side_to_move
    moves = position.legal_moves()
    if not moves:
        return SearchResult(None, evaluate(position.board, perspective), 0, 0)

    stats = SearchStats()
    best_move = moves[0]
    best_score = float('-inf')

    for move in moves:
        score = minimax(position.play(move), depth - 1, float('-inf'), float('inf'),
                        False, perspective, stats, prune)
        logger.debug("Root move %r scored %s", move, score)

        if score > best_score:
            best_score = score
            best_move = move

    logger.debug(
        "Search depth %d: best %r score %s (%d nodes, %d cutoffs)",
        depth, best_move, best_score, stats.nodes, stats.cutoffs,
    )
    return SearchResult(best_move, best_score, depth, stats.nodes)
