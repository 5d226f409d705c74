from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from .dice import distribution, roll_dice
from .errors import DiceSpecError
from .histogram import format_histogram, format_roll
from .models import DiceSpec
from .parser import parse_spec


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dice-histogram",
        description=(
            "Roll the specified dice and report the total, individual rolls, "
            "and percentage chance of the result."
        ),
    )
    parser.add_argument("dice", nargs="+", help="Dice specifications (e.g., 1d6, 2d4+3)")
    parser.add_argument(
        "-d",
        "--histogram",
        action="store_true",
        help="Also print the exact distribution of every possible total",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr")
    return parser


def _parse_all(raw_specs: Sequence[str]) -> list[DiceSpec]:
    return [parse_spec(raw) for raw in raw_specs]


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        specs = _parse_all(args.dice)
    except DiceSpecError as e:
        # Fail-fast: nothing is rolled once any spec is rejected.
        logger.debug("Rejected %r (%s)", e.spec, e.code)
        print(
            f"error: Error parsing dice specification '{e.spec}': {e.reason}",
            file=sys.stderr,
        )
        return 1

    for spec in specs:
        result = roll_dice(spec)
        dist = distribution(spec)
        print(format_roll(result, dist.get(result.total, 0.0)))
        if args.histogram:
            for line in format_histogram(dist):
                print(f"  {line}")

    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
