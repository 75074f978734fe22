#!/usr/bin/env python3
"""
riftdeck Deck Scorer CLI

Scores a saved deck against a set of player match statistics.
The deck file holds a deck payload ({"userId": ..., "slots": {...}});
the players file holds {"players": [...]}.

Usage:
    python score_deck.py --deck data/deck.json --players data/players.json
    python score_deck.py --deck data/deck.json --players data/players.json --output out/score.json
    python score_deck.py --deck data/deck.json --players data/players.json --require-complete
    python score_deck.py --deck data/deck.json --players data/players.json --debug deck_io
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from riftdeck import (
    DeckError,
    DeckPayloadError,
    ensure_complete,
    load_players,
    parse_deck,
    score_deck,
    summarize,
    validate_deck,
    validate_score_result,
)
from riftdeck.logging_config import get_logger, setup_logging
from riftdeck.utils import load_json, save_json


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Score a fantasy deck against player match stats")
    parser.add_argument(
        "--deck", "-d",
        required=True,
        help="Path to deck JSON file",
    )
    parser.add_argument(
        "--players", "-p",
        required=True,
        help="Path to players JSON file",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Write the score result as JSON to this path",
    )
    parser.add_argument(
        "--require-complete",
        action="store_true",
        help="Fail if any role slot is empty",
    )
    parser.add_argument(
        "--log-dir",
        default=None,
        help="Directory for log files (file logging is off unless set)",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress detailed output",
    )
    parser.add_argument(
        "--debug",
        action="append",
        default=[],
        metavar="MODULE",
        help="Enable debug logging for one riftdeck module (e.g. deck_io); repeatable",
    )

    args = parser.parse_args(argv)

    setup_logging(
        log_dir=Path(args.log_dir) if args.log_dir else None,
        level=logging.WARNING if args.quiet else logging.INFO,
        log_to_file=bool(args.log_dir),
        module_levels={module: logging.DEBUG for module in args.debug},
    )
    logger = get_logger('cli')

    try:
        deck = parse_deck(load_json(args.deck))
        players = load_players(args.players)
        if args.require_complete:
            deck = ensure_complete(deck)
    except (DeckError, DeckPayloadError) as e:
        logger.error(f'{e.code.value}: {e.message} {e.meta or ""}'.rstrip())
        return 1
    except (FileNotFoundError, json.JSONDecodeError, ValueError) as e:
        logger.error(str(e))
        return 1

    for problem in validate_deck(deck):
        logger.warning(problem)

    summary = summarize(deck)
    result = score_deck(deck, players)

    if not args.quiet:
        print(f"Deck value: {summary.total_value:g} | complete: {'yes' if summary.complete else 'no'}")
        print("=" * 60)
        for entry in result.entries:
            label = f" [{entry.multiplier_label.value}]" if entry.multiplier_label else ""
            print(
                f"  {entry.role.value:<5} {entry.player_name}: "
                f"{entry.base_score} x {entry.multiplier:g} = {entry.total_score} pts{label}"
            )
            for key, val in entry.breakdown.items():
                print(f"      {key}: {val}")
        for role in result.missing_roles:
            print(f"  {role.value:<5} -- not scored")
        print(f"\n  TOTAL: {result.total_score} points")

    for warning in validate_score_result(result):
        logger.warning(warning)

    if args.output:
        save_json(args.output, result)
        logger.info(f'Score written to {args.output}')

    return 0


if __name__ == "__main__":
    sys.exit(main())
