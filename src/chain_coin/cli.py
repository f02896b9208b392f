#!/usr/bin/env python3
"""Command line front-end: convert, add and subtract coin amounts.

Examples:
  chain-coin convert 1.5 --from cro --to base      -> 150000000
  chain-coin add 1 0.5 --unit cro                  -> 1.5
  chain-coin sub 100 250 --unit base               -> error (negative result)
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .core import Coin, CoinError, Unit

UNIT_CHOICES = [u.value for u in Unit]

_log = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="chain-coin", description="Exact native token amount arithmetic.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_conv = sub.add_parser("convert", help="Convert an amount between units")
    p_conv.add_argument("value", help="Amount literal")
    p_conv.add_argument("--from", dest="src", choices=UNIT_CHOICES, default=Unit.BASE.value, help="Input unit")
    p_conv.add_argument("--to", dest="dst", choices=UNIT_CHOICES, default=Unit.CRO.value, help="Output unit")

    for name, help_text in (("add", "Add two amounts"), ("sub", "Subtract the second amount from the first")):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("left", help="First amount literal")
        p.add_argument("right", help="Second amount literal")
        p.add_argument("--unit", choices=UNIT_CHOICES, default=Unit.BASE.value, help="Unit of inputs and output")

    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> str:
    """Execute the parsed command and return the rendered result."""
    if args.command == "convert":
        return Coin.parse(args.value, args.src).to_string(args.dst)

    left = Coin.parse(args.left, args.unit)
    right = Coin.parse(args.right, args.unit)
    result = left.add(right) if args.command == "add" else left.sub(right)
    _log.debug("%s %s %s -> %s base units", left, args.command, right, result)
    return result.to_string(args.unit)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        out = run(args)
    except CoinError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
