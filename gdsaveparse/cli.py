"""Command line: parse a save file from a path or standard input and print JSON."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .api import map_to_json
from .errors import ParseError

_VERSION = "0.1.0"
_ENTITY_TYPES = ("character", "formulas", "stash")
_FAILURES = (ParseError, EOFError, UnicodeDecodeError)


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gdsaveparse", description="Print a save file as JSON."
    )
    parser.add_argument(
        "-e", "--entity-type", choices=_ENTITY_TYPES, default="character",
        help="kind of file to parse (default: character)",
    )
    parser.add_argument(
        "-f", "--filepath", help="file to read; standard input when omitted"
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {_VERSION}")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Parse the input and print its JSON form, or the error message."""
    args = _parse_args(argv)
    if args.filepath is None:
        source = sys.stdin.buffer.read()
    else:
        try:
            with open(args.filepath, "rb") as handle:
                source = handle.read()
        except OSError as err:
            raise SystemExit(f"Cannot open file: {err}") from err
    try:
        result = map_to_json(args.entity_type, source)
    except _FAILURES as err:
        result = str(err)
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())