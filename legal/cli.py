"""Command-line front end: AutoCAD report file in, legal description out."""
import argparse
import logging
import sys
from typing import Optional, Sequence

from .constants import DEFAULT_CITY, DEFAULT_COUNTY, DEFAULT_STATE, THREAD_EXIT_TANGENTS
from .errors import LegalError
from .report import describe_report, parse_report

_USAGE_EPILOG = """\
basic usage:
  legal --kind="Drainage Easement" --cdir=N1d2m3sE --cdist=10.0 --lot=1 --block=1 \\
        --origin=southeast --sub="Super Great Addition" REPORTFILE.txt
"""


def _build_cli_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="legal",
        description="Read a 'metes and bounds report' from AutoCAD and print a "
                    "formatted legal description.",
        epilog=_USAGE_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("report", help="Path to the AutoCAD metes and bounds report.")
    parser.add_argument("--kind", default="",
                        help="Type of entity described, such as 'Temporary Construction Easement'.")
    parser.add_argument("--cdir", default="",
                        help="Bearing from point of commencement to point of beginning, "
                             "formatted {dir}{degree}d{minute}m{second}s{dir}, e.g. N12d34m56sE.")
    parser.add_argument("--cdist", type=float, default=0.0,
                        help="Distance along --cdir from point of commencement to point of beginning.")
    parser.add_argument("--lot", default="", help="Lot number (or letter).")
    parser.add_argument("--block", default="", help="Block number (or letter).")
    parser.add_argument("--origin", required=True,
                        help="Corner of the lot at the point of beginning or commencement "
                             "(e.g. northwest, E).")
    parser.add_argument("--sub", default="", help="Subdivision name.")
    parser.add_argument("--city", default=DEFAULT_CITY, help="City; empty to omit.")
    parser.add_argument("--county", default=DEFAULT_COUNTY, help="County name.")
    parser.add_argument("--state", default=DEFAULT_STATE, help="State name.")
    parser.add_argument("--thread-tangents", action="store_true", default=THREAD_EXIT_TANGENTS,
                        help="Judge tangency against the previous segment instead of north.")
    parser.add_argument("--debug", action="store_true", help="Enable verbose logging.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_cli_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(message)s",
    )

    try:
        with open(args.report, encoding="utf-8") as f:
            text = f.read()
    except OSError as exc:
        print(str(exc), file=sys.stderr)
        return 3

    try:
        desc = describe_report(
            parse_report(text),
            kind=args.kind, subdivision=args.sub, origin=args.origin,
            county=args.county, state=args.state, city=args.city,
            lot=args.lot, block=args.block, cdir=args.cdir, cdist=args.cdist,
        )
    except LegalError as exc:
        print(f"Failed to generate description: {exc}", file=sys.stderr)
        return 2

    print(desc.render(thread_tangents=args.thread_tangents))
    return 0
