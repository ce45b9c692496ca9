"""
Command line interface.

Usage:
    nordid 19130401+2931 992004920019
    nordid --long --json 20121212M714
"""

import argparse
import json
import logging
import sys
from typing import Optional

from nordid.clock import Clock, SystemClock
from nordid.config import settings
from nordid.errors import IdentityNumberError
from nordid.identity import IdentificationNumber, parse
from nordid.options import Options

logger = logging.getLogger(__name__)


def describe(number: IdentificationNumber, long_format: bool, clock: Clock) -> dict:
    """Summary of a parsed number for output."""
    return {
        "scheme": number.scheme.value,
        "formatted": number.format(long_format),
        "sex": number.sex.value,
        "age": number.get_age(clock),
        "coordination_number": number.is_coordination_number(),
        "reserve_number": number.is_reserve_number(),
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nordid",
        description="Validate Swedish, Norwegian and Danish identification numbers",
    )
    parser.add_argument("numbers", nargs="+", help="Numbers to check")
    parser.add_argument("--long", action="store_true", help="Print the long format")
    parser.add_argument("--json", action="store_true", help="Print JSON lines")
    parser.add_argument(
        "--allow-interim", action="store_true", help="Accept interim numbers"
    )
    parser.add_argument(
        "--no-coordination",
        action="store_true",
        help="Reject coordination numbers",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    args = build_parser().parse_args(argv)

    toggles = Options.from_settings().model_dump()
    if args.allow_interim:
        toggles["allow_interim_number"] = True
    if args.no_coordination:
        toggles["allow_coordination_number"] = False
    options = Options.model_validate(toggles)
    clock = SystemClock()

    failures = 0
    for raw in args.numbers:
        try:
            number = parse(raw, options, clock)
        except IdentityNumberError as e:
            failures += 1
            logger.info(f"Rejected input: {type(e).__name__}")
            result = {"input": raw, "valid": False, "error": e.message}
        else:
            result = {"input": raw, "valid": True, **describe(number, args.long, clock)}

        if args.json:
            print(json.dumps(result, ensure_ascii=False))
        elif result["valid"]:
            print(
                f"{raw}: {result['scheme']} {result['formatted']} "
                f"sex={result['sex']} age={result['age']}"
            )
        else:
            print(f"{raw}: invalid ({result['error']})")

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
