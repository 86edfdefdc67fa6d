"""diecodes command line.

    diecodes 2d6+3                one code, prints "===> 9"
    diecodes d66 d6xd6            several codes, each echoed before its result
    diecodes -e 3d6               sixes explode
    diecodes -6 d66               roll a genuine 66-sided die
    diecodes -v d6E               show every individual die
    echo "d6+1" | diecodes        no codes: read one per line from stdin
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable, Iterator

from .config import get_settings
from .dice import roll
from .errors import DiceError
from .logs import setup_logging
from .roller import RandomRoller
from .spew import Spew, SpewLevel


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="diecodes",
        description="Roll tabletop dice codes such as 2d6+3, d6xd6, d66 or 3d12-3E.",
        epilog=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("codes", nargs="*", metavar="CODE", help="dice codes (read from stdin when omitted)")
    parser.add_argument("-e", "--explode", action="store_true", help="sixes on a d6 explode for every code")
    parser.add_argument(
        "-6", "--force-66", dest="force_66", action="store_true", help="treat d66 as a real 66-sided die"
    )

    level = parser.add_mutually_exclusive_group()
    level.add_argument("-q", "--quiet", action="store_true", help="print results only")
    level.add_argument("-v", "--verbose", action="store_true", help="print every die rolled")
    return parser


def _stdin_codes(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        code = line.strip()
        if code:
            yield code


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level)

    if args.quiet:
        level = SpewLevel.QUIET
    elif args.verbose:
        level = SpewLevel.VERBOSE
    else:
        level = SpewLevel.parse(settings.verbosity)
    spew = Spew(level)

    explode = args.explode or settings.explode
    force_66 = args.force_66 or settings.force_standard_66

    if args.codes:
        codes: Iterable[str] = args.codes
        echo = len(args.codes) > 1
    else:
        codes = _stdin_codes(sys.stdin)
        echo = True

    roller = RandomRoller()
    for code in codes:
        if echo:
            spew.spew(code)
        try:
            result = roll(code, explode, force_66, roller=roller, spew=spew)
        except DiceError as e:
            logger.debug("rejected %r", code, exc_info=True)
            print(f"error: {e}", file=sys.stderr)
            return 1
        spew.quiet(f"===> {result}")
        if echo:
            spew.spew("")

    return 0


if __name__ == "__main__":
    sys.exit(main())
