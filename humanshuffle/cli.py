"""Command line demo: shuffle a deck by hand and print it."""

import argparse
import logging
import sys
from random import Random

from config import AppConfig, config
from humanshuffle.deck import Deck
from humanshuffle.logging_utils import LOG_LEVELS, setup_logging
from humanshuffle.shuffling import ShuffleSettings, available_styles, get_style

logger = logging.getLogger(__name__)


def build_parser(app_config: AppConfig) -> argparse.ArgumentParser:
    """Build the argument parser, with defaults taken from the configuration."""
    parser = argparse.ArgumentParser(
        prog="humanshuffle",
        description="Shuffle a standard deck the way a person would.",
    )
    parser.add_argument(
        "--style",
        default=app_config.shuffle.style,
        help=f"shuffle style, one of: {', '.join(available_styles())}",
    )
    parser.add_argument("--passes", type=int, default=app_config.shuffle.passes,
                        help="number of extra passes chained after the first shuffle")
    parser.add_argument("--seed", type=int, default=app_config.seed)
    parser.add_argument("--split-precision", type=float,
                        default=app_config.shuffle.split_precision)
    parser.add_argument("--left-handed", action="store_true",
                        default=not app_config.shuffle.dealer_is_right_handed)
    parser.add_argument("--format", choices=["name", "short"], default="name")
    parser.add_argument("--no-sort", action="store_true", help="skip the sorted listing")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="DEBUG" if app_config.debug else app_config.logging.level,
    )
    return parser


def _label(card, fmt: str) -> str:
    return card.short if fmt == "short" else str(card)


def main(argv: list[str] | None = None, app_config: AppConfig = config) -> int:
    """Run the demo and return the process exit code."""
    args = build_parser(app_config).parse_args(argv)
    setup_logging(args.log_level, app_config.logging.format)

    if args.passes < 0:
        print("error: --passes must not be negative", file=sys.stderr)
        return 2

    try:
        settings = ShuffleSettings(
            split_precision=args.split_precision,
            dealer_is_right_handed=not args.left_handed,
        )
        style = get_style(args.style, settings)
        deck = Deck(rng=Random(args.seed))
        deck.shuffle(style)
        deck.shuffle([style] * args.passes)
    except (ValueError, NotImplementedError) as e:
        logger.debug("Shuffle failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(f"size: {len(deck)}")
    for card in deck:
        print(_label(card, args.format))

    print(f"Set count: {len(set(deck))}")

    if not args.no_sort:
        deck.sort()
        for card in deck:
            print(f"sorted: {_label(card, args.format)}")

    return 0
