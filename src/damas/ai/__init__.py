"""Automated opponent: material evaluation, alpha-beta search and difficulty policies."""

from .eval import evaluate, material
from .search import SearchResult, SearchStats, minimax, find_best_move
from .policies import Difficulty, choose_move

__all__ = [
    'evaluate',
    'material',
    'SearchResult',
    'SearchStats',
    'minimax',
    'find_best_move',
    'Difficulty',
    'choose_move',
]
