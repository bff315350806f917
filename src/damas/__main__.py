"""Main entry point: play Spanish draughts in the terminal."""

import sys
import time
import argparse
import logging
from pathlib import Path
from typing import FrozenSet, List, Optional

from .types import Player, Square
from .board import Board
from .position import Position
from .config import Config, get_config, set_config, save_config, DIFFICULTIES, LOG_LEVELS
from .engine import Engine, GameResult
from .errors import ConfigError
from .utils import setup_logger

logger = logging.getLogger(__name__)


def print_initial_state():
    """Print the initial position and its legal moves."""
    position = Position.initial()

    print("=" * 40)
    print("Spanish Draughts - Initial Position")
    print("=" * 40)
    print()
    print(position)
    print()

    moves = position.legal_moves()
    print(f"Legal moves for {position.side_to_move.name.title()}: {len(moves)}")
    print()
    for i, move in enumerate(moves, 1):
        print(f"  {i}. {move}")
    print()


def render(board: Board, targets: FrozenSet[Square]) -> None:
    """Draw the board, marking legal targets with '*'."""
    lines = ["  0 1 2 3 4 5 6 7"]
    for row in range(Board.SIZE):
        cells = []
        for col in range(Board.SIZE):
            piece = board.get_piece((row, col))
            if (row, col) in targets:
                cells.append("*")
            elif piece is None:
                cells.append("." if Board.is_playable(row, col) else " ")
            elif piece.player == Player.WHITE:
                cells.append("W" if piece.is_king else "w")
            else:
                cells.append("R" if piece.is_king else "r")
        lines.append(f"{row} " + " ".join(cells).rstrip())

    white_men, white_kings = board.count_pieces(Player.WHITE)
    red_men, red_kings = board.count_pieces(Player.RED)
    lines.append(f"White: {white_men + white_kings}  Red: {red_men + red_kings}")
    print("\n".join(lines))
    print()


def parse_square(text: str) -> Optional[Square]:
    """Parse 'row col' or 'row,col' into a square."""
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def play(config: Config) -> int:
    """Run an interactive game on stdin/stdout."""
    engine = Engine(config)
    pending: List[Player] = []

    engine.on_render = render
    engine.on_cue = lambda cue: print(f"[{cue.value}]")
    engine.on_move_request = pending.append

    def announce(result: GameResult) -> None:
        print(f"Game over! {result.winner.name.title()} wins after {result.total_turns} turns.")

    engine.on_game_over = announce
    engine.new_game()

    delay = config.search.move_delay_ms / 1000.0

    while True:
        if pending:
            pending.clear()
            print("Computer thinking...")
            time.sleep(delay)
            engine.play_automated_turn()
            continue

        if not engine.running:
            prompt = "[n]ew game or [q]uit: "
        else:
            prompt = f"{engine.side_to_move.name.title()} to move (row col, d <level>, n, q): "

        try:
            line = input(prompt).strip().lower()
        except EOFError:
            print()
            return 0

        if line in ("q", "quit"):
            return 0
        if line in ("n", "new"):
            engine.new_game()
            continue

        if line.startswith("d "):
            level = line[2:].strip()
            try:
                engine.set_difficulty(level)
            except ValueError:
                print(f"Difficulty must be one of: {', '.join(DIFFICULTIES)}")
                continue
            print(f"Difficulty: {engine.difficulty.value}")
            continue

        square = parse_square(line)
        if square is None:
            print("Enter a square as: row col")
            continue

        outcome = engine.select_square(*square)
        logger.debug("Selection %s -> %s", square, outcome.value)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="damas",
        description="Play Spanish draughts against the computer or another player.",
    )
    parser.add_argument("--difficulty", choices=DIFFICULTIES, help="Opponent difficulty")
    parser.add_argument("--pvp", action="store_true", help="Two players, no computer")
    parser.add_argument("--depth", type=int, help="Search depth for the hard difficulty")
    parser.add_argument("--seed", type=int, help="Seed for the random policies")
    parser.add_argument("--config", type=Path, help="Path to a settings.yaml file")
    parser.add_argument("--log-level", choices=LOG_LEVELS, help="Logging level")
    parser.add_argument("--save-config", action="store_true",
                        help="Write the effective settings to the settings file")
    parser.add_argument("--test", action="store_true",
                        help="Print the initial position and legal moves, then exit")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.test:
        print_initial_state()
        return 0

    try:
        config = Config.load(args.config) if args.config else get_config()
    except ConfigError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    if args.difficulty:
        config.game.difficulty = args.difficulty
    if args.pvp:
        config.game.difficulty = "pvp"
    if args.depth is not None:
        config.search.depth = args.depth
    if args.seed is not None:
        config.search.seed = args.seed
    if args.log_level:
        config.logging.level = args.log_level

    try:
        set_config(config)
    except ConfigError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    setup_logger("damas", config.logging.log_file, config.logging.level)

    if args.save_config:
        print(f"Settings saved to {save_config()}")

    return play(config)


if __name__ == "__main__":
    sys.exit(main())
