"""
Main entry point for playing Word Scramble in a terminal.

Usage:
    python -m wordscramble.main
    python -m wordscramble.main config.yaml --seed 42 --verbose
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Optional

import yaml

from .environment import WordGameEngine, GameConfig
from .errors import ResourceLoadError


NEW_ROUND_COMMAND = ":new"
WORDS_COMMAND = ":words"
QUIT_COMMAND = ":quit"


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """Load game configuration from a YAML file, or defaults when no path is given."""
    if config_path is None:
        return GameConfig()

    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    # Word list paths are relative to the config file
    for key in ("start_words_path", "dictionary_path"):
        value = data.get(key)
        if value and not Path(value).is_absolute():
            data[key] = path.parent / value

    return GameConfig(**data)


def render_round(engine: WordGameEngine) -> str:
    """Format the root word, accepted words and score for display."""
    lines = [f"=== {engine.root_word} ==="]
    for word in engine.accepted_words:
        lines.append(f"  ({len(word)}) {word}")
    lines.append(f"Score: {engine.score}")
    lines.append(f"Max possible words: {engine.max_possible_words}")
    return "\n".join(lines)


def play(engine: WordGameEngine, read_line: Optional[Callable[[str], str]] = None) -> int:
    """
    Run the interactive loop until the player quits or input ends.

    Returns the score of the last round.
    """
    read_line = read_line or input
    print(render_round(engine))
    print(f"Commands: {NEW_ROUND_COMMAND} new word, {WORDS_COMMAND} show answers, {QUIT_COMMAND} exit")

    while True:
        try:
            line = read_line("> ")
        except EOFError:
            print()
            break

        command = line.strip().lower()
        if not command:
            continue

        if command == QUIT_COMMAND:
            break

        if command == WORDS_COMMAND:
            print(", ".join(engine.possible_words) or "(none)")
            continue

        if command == NEW_ROUND_COMMAND:
            found = len(engine.accepted_words)
            print(f"Found {found} of {engine.max_possible_words} words for {engine.score} points")
            try:
                engine.start_round()
            except ResourceLoadError as e:
                print(f"Error starting new round: {e}", file=sys.stderr)
                continue
            print(render_round(engine))
            continue

        result = engine.submit_word(line)
        if result.accepted:
            print(f"+{result.points} {result.word}")
            print(render_round(engine))
        else:
            print(f"{result.rejection.title}: {result.rejection.message}")

    return engine.score


def main():
    parser = argparse.ArgumentParser(
        description="Play Word Scramble",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml (word list paths are relative to this file):
  start_words_path: words/start.txt
  dictionary_path: words/english-words.txt   # omit to use wordfreq
  dictionary_size: 50000
  min_zipf: 2.0
  language: en
  min_word_length: 3
  points_per_letter: 10
  seed: 42
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (bundled word lists are used by default)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for choosing root words (overrides config)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log round details, including every possible word"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if args.seed is not None:
        config = config.model_copy(update={"seed": args.seed})

    try:
        engine = WordGameEngine.create(config=config)
        engine.start_round()
    except ResourceLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        score = play(engine)
    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        score = engine.score

    print()
    print("=== Game Summary ===")
    print(f"Rounds played: {engine.round_number}")
    print(f"Final score: {score}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
