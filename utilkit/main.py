"""Command line entry point for utilkit."""

from __future__ import annotations

import argparse
import datetime
import logging
import sys
from pathlib import Path

from utilkit.config import settings
from utilkit.files.filehash import (
    get_hash,
    get_hashes,
    save_hashes,
    verify_hashes,
)
from utilkit.text import basex
from utilkit.text.fuzzy_search import find_matches
from utilkit.timeutil.iso8601 import WeekDate

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="utilkit", description="Assorted utilities")
    sub = parser.add_subparsers(dest="command", required=True)

    search = sub.add_parser("search", help="Rank lines by fuzzy match against a pattern")
    search.add_argument("pattern")
    search.add_argument("file", nargs="?", help="Input file (default: stdin)")
    search.add_argument("-n", "--limit", type=int, default=10)

    hash_ = sub.add_parser("hash", help="MD5 a file or every file in a directory")
    hash_.add_argument("path")
    hash_.add_argument("-o", "--output", metavar="FILE", help="Write a hash list to FILE")

    verify = sub.add_parser("verify", help="Check files against a hash list")
    verify.add_argument("hash_file")

    bx = sub.add_parser("basex", help="Convert integers to and from base-N")
    bx.add_argument("value")
    bx.add_argument("-b", "--base", type=int, choices=sorted(basex.ALPHABETS), default=36)
    bx.add_argument("-d", "--decode", action="store_true", help="Decode VALUE to decimal")

    week = sub.add_parser("weekdate", help="Print the ISO week date of a day")
    week.add_argument("date", nargs="?", help="YYYY-MM-DD (default: today)")

    return parser


def _cmd_search(args: argparse.Namespace) -> int:
    if args.file:
        lines = Path(args.file).read_text(encoding="utf-8").splitlines()
    else:
        lines = sys.stdin.read().splitlines()

    matches = find_matches(args.pattern, lines, limit=args.limit)
    for line, score, _idx in matches:
        print(f"{score}\t{line}")
    return 0 if matches else 1


def _cmd_hash(args: argparse.Namespace) -> int:
    path = Path(args.path)
    hashes = get_hashes(path) if path.is_dir() else [get_hash(path)]

    if args.output:
        save_hashes(hashes, args.output)
        logger.info("Wrote %d hashes to %s", len(hashes), args.output)
    else:
        for entry in hashes:
            print(f"{entry.md5}  {entry.name}")
    return 0


def _cmd_verify(args: argparse.Namespace) -> int:
    mismatched = verify_hashes(args.hash_file)
    for entry in mismatched:
        status = "CHANGED" if entry.path.is_file() else "MISSING"
        print(f"{status}\t{entry.name}")
    return 1 if mismatched else 0


def _cmd_basex(args: argparse.Namespace) -> int:
    alphabet = basex.ALPHABETS[args.base]
    if args.decode:
        print(basex.to_int(args.value, alphabet))
    else:
        print(basex.from_int(int(args.value), alphabet))
    return 0


def _cmd_weekdate(args: argparse.Namespace) -> int:
    day = datetime.date.fromisoformat(args.date) if args.date else datetime.date.today()
    print(WeekDate(day))
    return 0


_COMMANDS = {
    "search": _cmd_search,
    "hash": _cmd_hash,
    "verify": _cmd_verify,
    "basex": _cmd_basex,
    "weekdate": _cmd_weekdate,
}


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )
    args = _build_parser().parse_args(argv)

    try:
        return _COMMANDS[args.command](args)
    except (OSError, ValueError) as e:
        logger.error("%s failed: %s", args.command, e)
        return 2
    except Exception:
        logger.exception("Unhandled error in %s", args.command)
        return 2


if __name__ == "__main__":
    sys.exit(main())
