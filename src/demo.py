"""Command-line demonstration of a single Lorentz transform.

Usage:
    python -m src.demo X T BETA [--digits N] [--verbose]
    python -m src.demo --json '{"x": 0, "t": 1, "beta": 0.6}'

Prints the original and transformed coordinates, the invariant in both
frames and the transform parameters. Exit codes: 0 = success,
2 = invalid arguments (including |BETA| >= 1 and payloads that violate
the transform_request contract).
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from jsonschema import ValidationError

from src.core.contracts.validators import parse_transform_request
from src.core.math.lorentz import InvalidParameter
from src.reporting.transform_report import DISPLAY_DIGITS_DEFAULT, ReportConfig, TransformReporter

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the demo."""
    parser = argparse.ArgumentParser(
        prog="src.demo",
        description="Apply a 1+1D Lorentz transform (c = 1) to an event and "
                    "show the invariant interval in both frames.",
    )

    parser.add_argument("x", type=float, nargs="?", help="Position of the event.")
    parser.add_argument("t", type=float, nargs="?", help="Time of the event.")
    parser.add_argument(
        "beta",
        type=float,
        nargs="?",
        help="Velocity of the target frame as a fraction of c, |beta| < 1.",
    )

    parser.add_argument(
        "--json",
        dest="payload",
        default=None,
        help='Transform request as JSON, e.g. \'{"x": 0, "t": 1, "beta": 0.6}\'. '
             "Replaces the positional arguments.",
    )

    parser.add_argument(
        "--digits",
        type=int,
        default=DISPLAY_DIGITS_DEFAULT,
        help="Decimal digits shown for derived values (default: %(default)s).",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the demo.

    argv=None means use sys.argv; explicit argv is for testing.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    positionals = (args.x, args.t, args.beta)
    if args.payload is None and None in positionals:
        parser.error("X, T and BETA are required unless --json is given")
    if args.payload is not None and positionals != (None, None, None):
        parser.error("--json cannot be combined with X, T and BETA")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.payload is not None:
        try:
            x, t, beta = parse_transform_request(args.payload)
        except json.JSONDecodeError as e:
            logger.error("--json is not valid JSON: %s", e)
            return 2
        except ValidationError as e:
            logger.error("--json violates the transform_request contract: %s", e.message)
            return 2
    else:
        x, t, beta = positionals

    reporter = TransformReporter(ReportConfig(digits=args.digits))
    try:
        report = reporter.build(x, t, beta)
    except InvalidParameter as e:
        logger.error("%s", e)
        return 2

    print(reporter.render(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
