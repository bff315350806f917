"""Game engine - orchestrates turns, input and the automated opponent."""

import random
import logging
from enum import Enum
from typing import Optional, Callable, List, FrozenSet
from dataclasses import dataclass, field

from .types import Move, Player, Square
from .board import Board
from .position import Position
from .selector import moves_from, has_legal_moves
from .applier import apply_move, continuation_moves, pick_continuation
from .ai.policies import Difficulty, choose_move
from .config import Config, get_config

logger = logging.getLogger(__name__)


class Cue(Enum):
    """Audio cues emitted after committed actions."""
    MOVE = "move"
    CAPTURE = "capture"
    WIN = "win"


class SelectionOutcome(Enum):
    """What a square selection did."""
    IGNORED = "ignored"        # Not this player's input, or not allowed right now
    SELECTED = "selected"      # Own piece selected, targets shown
    DESELECTED = "deselected"  # Selection cleared
    CONTINUE = "continue"      # Move committed, same piece must capture again
    COMMITTED = "committed"    # Move committed, turn passed


@dataclass
class TurnRecord:
    """One completed turn: the moves played by one piece."""
    player: Player
    moves: List[Move] = field(default_factory=list)

    @property
    def captured(self) -> int:
        return sum(m.length for m in self.moves)


@dataclass
class GameResult:
    """Result of a completed game."""
    winner: Player
    total_turns: int
    final_position: Position


class Engine:
    """
    Turn orchestrator.

    Owns the live position and is the only caller of ``apply_move`` on it.
    Interactive input arrives through ``select_square``; automated turns
    are played by ``play_automated_turn``.

    Callbacks:
        on_render(board, targets): after every state or selection change
        on_cue(cue): after every committed move and on game over
        on_game_over(result): once, when a side cannot move
        on_move_request(player): when an automated side is due to move. If
            unset, the automated turn is played immediately.
    """

    def __init__(self, config: Optional[Config] = None, rng: Optional[random.Random] = None):
        config = config if config is not None else get_config()

        self.difficulty = Difficulty(config.game.difficulty)
        self.automated_player = Player[config.game.automated_side.upper()]
        self.search_depth = config.search.depth
        self.rng = rng if rng is not None else random.Random(config.search.seed)

        self.position: Position = Position.initial()
        self.running = False
        self.winner: Optional[Player] = None
        self.history: List[TurnRecord] = []

        # Interactive selection state
        self.selected: Optional[Square] = None
        self.legal_targets: List[Move] = []
        self._forced_square: Optional[Square] = None
        self._turn: Optional[TurnRecord] = None

        # Callbacks
        self.on_render: Optional[Callable[[Board, FrozenSet[Square]], None]] = None
        self.on_cue: Optional[Callable[[Cue], None]] = None
        self.on_game_over: Optional[Callable[[GameResult], None]] = None
        self.on_move_request: Optional[Callable[[Player], None]] = None

    # ------------------------------------------------------------------
    # Game lifecycle
    # ------------------------------------------------------------------

    def new_game(self, position: Optional[Position] = None) -> None:
        """Start a new game, from the standard setup unless a position is given."""
        self.position = position.clone() if position is not None else Position.initial()
        self.running = True
        self.winner = None
        self.history = []
        self._turn = None
        self._clear_selection()
        logger.info("New game (difficulty=%s)", self.difficulty.value)
        self._render()

        if not has_legal_moves(self.position.board, self.side_to_move):
            self._finish_game(self.side_to_move.opponent())
            return

        self._request_move_if_automated()

    def set_difficulty(self, difficulty: Difficulty) -> None:
        """
        Change the difficulty mid-game.

        If the side to move becomes automated it is asked to move straight
        away, finishing any capture a player had started.

        Raises:
            ValueError: If the difficulty is unknown.
        """
        self.difficulty = Difficulty(difficulty)
        logger.info("Difficulty set to %s", self.difficulty.value)

        if self.running and self.is_automated(self.side_to_move):
            if self._forced_square is None:
                self._clear_selection()
                self._render()
            self._request_move_if_automated()

    def is_automated(self, player: Player) -> bool:
        """Check if a player is driven by the automated policy."""
        return self.difficulty.is_automated and player == self.automated_player

    @property
    def side_to_move(self) -> Player:
        return self.position.side_to_move

    @property
    def target_squares(self) -> FrozenSet[Square]:
        """Landing squares of the current selection."""
        return frozenset(m.end for m in self.legal_targets)

    def legal_moves(self) -> List[Move]:
        """Legal moves for the side to move, honouring a pending continuation."""
        if self._forced_square is not None:
            return continuation_moves(self.position.board, self._forced_square)
        return self.position.legal_moves()

    # ------------------------------------------------------------------
    # Interactive input
    # ------------------------------------------------------------------

    def select_square(self, row: int, col: int) -> SelectionOutcome:
        """
        Handle a square chosen by the input collaborator.

        Selecting one of your pieces shows its legal targets, selecting a
        target commits that move, anything else clears the selection. While
        a capture must be continued only the continuation targets respond.
        """
        if not self.running or not Board.in_bounds(row, col):
            return SelectionOutcome.IGNORED
        if self.is_automated(self.side_to_move):
            return SelectionOutcome.IGNORED

        square = (row, col)
        target = next((m for m in self.legal_targets if m.end == square), None)

        if target is not None:
            return self._commit(target)

        if self._forced_square is not None:
            # The capturing piece must keep going
            return SelectionOutcome.IGNORED

        piece = self.position.board.get_piece(square)
        if piece is not None and piece.player == self.side_to_move:
            self.selected = square
            self.legal_targets = moves_from(self.position.legal_moves(), square)
            self._render()
            return SelectionOutcome.SELECTED

        self._clear_selection()
        self._render()
        return SelectionOutcome.DESELECTED

    def make_move(self, move: Move) -> bool:
        """
        Commit a move for the side to move.

        Returns True if the move was legal and applied. A capture that can
        be continued leaves the turn open; call again with a continuation.
        """
        if not self.running:
            return False

        legal = self.legal_moves()
        if move not in legal:
            # Try to find a matching move (path comparison)
            matching = [m for m in legal if m.path == move.path]
            if not matching:
                return False
            move = matching[0]

        self._commit(move)
        return True

    # ------------------------------------------------------------------
    # Automated opponent
    # ------------------------------------------------------------------

    def play_automated_turn(self) -> Optional[Move]:
        """
        Play a full turn for the side to move using the difficulty policy.

        Forced continuations are played out with the deterministic
        continuation tie-break.

        Returns:
            The first move played, or None if nothing was played. When a
            player had started a capture, that is its first continuation.
        """
        if not self.running or not self.is_automated(self.side_to_move):
            return None

        if self._forced_square is not None:
            move = pick_continuation(self.legal_targets)
        else:
            move = choose_move(self.position, self.difficulty, self.rng, self.search_depth)
            if move is None:
                self._finish_game(self.side_to_move.opponent())
                return None

        outcome = self._commit(move)
        while outcome == SelectionOutcome.CONTINUE:
            outcome = self._commit(pick_continuation(self.legal_targets))

        return move

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _commit(self, move: Move) -> SelectionOutcome:
        """Apply one move to the live board and advance the turn state."""
        player = self.side_to_move
        outcome = apply_move(self.position.board, move)

        if self._turn is None:
            self._turn = TurnRecord(player)
        self._turn.moves.append(move)

        self._emit(Cue.CAPTURE if move.is_capture else Cue.MOVE)
        if outcome.promoted:
            logger.info("%s promoted at %s", player.name.title(), move.end)

        if move.is_capture:
            continuations = continuation_moves(self.position.board, move.end)
            if continuations:
                self._forced_square = move.end
                self.selected = move.end
                self.legal_targets = continuations
                self._render()
                return SelectionOutcome.CONTINUE

        self._end_turn()
        return SelectionOutcome.COMMITTED

    def _end_turn(self) -> None:
        """Record the finished turn, pass it on and check for game over."""
        record = self._turn
        self._turn = None
        self.history.append(record)
        logger.info(
            "%s played %s",
            record.player.name.title(),
            " then ".join(repr(m) for m in record.moves),
        )

        self._clear_selection()
        self.position.side_to_move = record.player.opponent()
        self.position.move_count += 1
        self._render()

        if not has_legal_moves(self.position.board, self.side_to_move):
            self._finish_game(record.player)
            return

        self._request_move_if_automated()

    def _finish_game(self, winner: Player) -> None:
        self.running = False
        self.winner = winner
        self._clear_selection()
        logger.info("Game over: %s wins after %d turns", winner.name.title(), len(self.history))
        self._emit(Cue.WIN)
        self._render()
        if self.on_game_over:
            self.on_game_over(GameResult(winner, len(self.history), self.position.clone()))

    def _clear_selection(self) -> None:
        self.selected = None
        self.legal_targets = []
        self._forced_square = None

    def _render(self) -> None:
        if self.on_render:
            self.on_render(self.position.board, self.target_squares)

    def _emit(self, cue: Cue) -> None:
        if self.on_cue:
            self.on_cue(cue)

    def _request_move_if_automated(self) -> None:
        """Request a move if the side to move is automated."""
        if not self.running or not self.is_automated(self.side_to_move):
            return
        if self.on_move_request:
            self.on_move_request(self.side_to_move)
        else:
            self.play_automated_turn()
