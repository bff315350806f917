"""Difficulty policies for choosing the automated side's move."""

import random
import logging
from enum import Enum
from typing import Optional

from ..types import Move
from ..position import Position
from ..rules import DEFAULT_SEARCH_DEPTH
from .search import find_best_move

logger = logging.getLogger(__name__)


class Difficulty(str, Enum):
    """Difficulty levels. PVP turns the automated side off."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    PVP = "pvp"

    @property
    def is_automated(self) -> bool:
        return self != Difficulty.PVP


def choose_move(
    position: Position,
    difficulty: Difficulty,
    rng: Optional[random.Random] = None,
    depth: int = DEFAULT_SEARCH_DEPTH,
) -> Optional[Move]:
    """
    Pick a move for the side to move.

    Args:
        position: Current position
        difficulty: 'easy' picks uniformly at random, 'medium' picks a random
            capture when one exists, 'hard' runs the alpha-beta search
        rng: Random source for the easy and medium policies
        depth: Search depth for the hard policy

    Returns:
        The chosen move, or None if no legal moves exist.

    Raises:
        ValueError: If the difficulty is not an automated one.
    """
    difficulty = Difficulty(difficulty)
    if not difficulty.is_automated:
        raise ValueError("PvP games have no automated policy")

    moves = position.legal_moves()
    if not moves:
        return None

    if rng is None:
        rng = random.Random()

    if difficulty == Difficulty.EASY:
        return rng.choice(moves)

    if difficulty == Difficulty.MEDIUM:
        captures = [m for m in moves if m.is_capture]
        return rng.choice(captures or moves)

    result = find_best_move(position, depth)
    logger.debug("Hard policy chose %r (score %s, %d nodes)", result.move, result.score, result.nodes)
    return result.move
