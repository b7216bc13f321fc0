"""
Main entry point for playing the word grid game in a terminal.

Usage:
    python -m src.main
    python -m src.main config.yaml --seed 42 --output results/game.json --verbose
"""

import argparse
import logging
import sys
from itertools import chain
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional

import yaml
from pydantic import ValidationError

from .engine import WordGridError
from .session import Game, GameConfig
from .session.messages import (
    format_solution,
    format_status,
    format_submission,
    format_word_list,
    get_instructions,
)


def load_config(config_path: Optional[str] = None, **overrides) -> GameConfig:
    """Load game configuration from a YAML file, applying non-None overrides."""
    data = {}
    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        with open(path) as f:
            data = yaml.safe_load(f) or {}

    data.update({key: value for key, value in overrides.items() if value is not None})
    return GameConfig(**data)


def read_tokens(lines: Iterable[str]) -> Iterator[str]:
    """Yield whitespace separated tokens, reading more lines only when needed."""
    for line in lines:
        yield from line.split()


def take(tokens: Iterator[str], count: int) -> Optional[List[str]]:
    """Read exactly count tokens, or None if input ends first."""
    taken = []
    for token in tokens:
        taken.append(token)
        if len(taken) == count:
            return taken
    return None if count else []


def run_game(
    game: Game,
    tokens: Iterator[str],
    write: Callable[..., None] = print,
) -> str:
    """
    Play the interactive loop until time runs out, the player exits or input ends.

    Args:
        game: The game to play
        tokens: Player input, one token at a time
        write: Output function (print by default)

    Returns:
        The reason the game ended
    """
    while not game.is_over():
        state = game.get_state()
        seconds = None if state["timer_paused"] else state["seconds_remaining"]
        write(format_status(state["board"], state["score"], seconds))
        write(f"{game.moves + 1}.   Enter a word: ", end="", flush=True)

        token = next(tokens, None)
        if token is None:
            game.end_reason = "End of input"
            return game.end_reason

        command = token.lower() if len(token) == 1 else ""

        if command == "x":
            game.end_reason = "Player exited"
            return game.end_reason

        if command == "s":
            write("Enter min and max word lengths to display: ", end="", flush=True)
            bounds = take(tokens, 2)
            try:
                min_length, max_length = (int(b) for b in bounds)
            except (TypeError, ValueError):
                write("\nWord lengths must be two numbers.")
                continue
            try:
                words = game.solve(min_length, max_length)
            except WordGridError as e:
                write(f"\n{e}")
                continue
            write()
            write(format_solution(words))
            write("Exiting the program.")
            game.end_reason = "Board solved"
            return game.end_reason

        if command == "t":
            if game.clock.toggle():
                write("Timer has been shut off\n")
            else:
                write("Timer is back on\n")
            continue

        if command == "r":
            count = game.board.cell_count
            write(f"\nEnter {count} characters to be used to set the board: ")
            # Letters may be typed together or separated by whitespace
            letters = take(chain.from_iterable(tokens), count)
            if letters is None:
                game.end_reason = "End of input"
                return game.end_reason
            try:
                game.reset_board(letters)
            except WordGridError as e:
                write(f"Board not changed: {e}")
            write()
            continue

        submission = game.submit(token)
        write(format_submission(submission))
        write(f"Words so far are: {format_word_list(game.found_words())}")

    write("I let you finish your last move. Time is up!")
    game.end_reason = "Time is up"
    return game.end_reason


def main():
    parser = argparse.ArgumentParser(
        description="Play the word grid game against the clock",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  dictionary_path: dictionary.txt
  seconds_to_play: 60
  min_word_length: 3
  max_word_length: 16
  seed: 42
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (optional)"
    )
    parser.add_argument(
        "--dictionary", "-d",
        help="Path to the word list (overrides the config file)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for the board"
    )
    parser.add_argument(
        "--letters",
        help="Preset board letters in row-major order, e.g. acrlneappusteory"
    )
    parser.add_argument(
        "--no-timer",
        action="store_true",
        help="Start with the timer switched off"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save a JSON summary of the game"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log dictionary and board details"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    try:
        config = load_config(args.config, dictionary_path=args.dictionary, seed=args.seed)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    try:
        game = Game.create(
            config=config,
            letters=list(args.letters) if args.letters else None,
        )
    except WordGridError as e:
        print(f"Error starting game: {e}", file=sys.stderr)
        return 1

    if args.no_timer:
        game.clock.toggle()

    print(get_instructions(config.seconds_to_play, game.board.cell_count))

    try:
        run_game(game, read_tokens(sys.stdin))
    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        game.end_reason = "Interrupted by user"

    if args.output:
        game.save_result(args.output)
        print(f"Results saved to: {args.output}")

    print()
    print("=== Game Summary ===")
    print(f"Score: {game.score}")
    print(f"Words found: {format_word_list(game.found_words())}")
    print(f"End reason: {game.end_reason}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
