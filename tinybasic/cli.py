"""Command line interface for the TinyBASIC translator.

Usage:
    python -m tinybasic.cli path/to/script.bas [-o output.c] [--tokens]

Set ``TINYBASIC_DEBUG`` to also print the token listing to stderr before
translating.


File: cli.py
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

import argparse
import os
import sys

from tinybasic.compiler import scan_file, translate_file
from tinybasic.exceptions import TinyBasicError
from tinybasic.listing import enumerate_tokens


DEBUG_ENV = "TINYBASIC_DEBUG"


def build_arg_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser for the ``tinyb`` command.
    """
    parser = argparse.ArgumentParser(
        prog="tinyb",
        description="Translate a TinyBASIC script to C",
        allow_abbrev=False,
    )
    parser.add_argument("src", help="Path to the TinyBASIC source script")
    parser.add_argument(
        "-o", "--out", dest="out", default=None, help="Output .c file path (default: stdout)"
    )
    parser.add_argument(
        "--tokens",
        action="store_true",
        help="Print the token listing instead of translating",
    )
    return parser


def run(src: str, out: str | None, tokens_only: bool) -> None:
    """
    Scan and translate one script.

    Raises:
        TinyBasicError: On any source, lexical or syntactic failure.
    """
    if tokens_only:
        sys.stdout.write(enumerate_tokens(scan_file(src)))
        return
    listing = sys.stderr if os.environ.get(DEBUG_ENV) else None
    c_code = translate_file(src, out, listing=listing)
    if out is None:
        sys.stdout.write(c_code)


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the CLI.

    Returns:
        int: 0 on success, 1 if the script could not be translated.
    """
    args = build_arg_parser().parse_args(argv)
    try:
        run(args.src, args.out, args.tokens)
    except TinyBasicError as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main(sys.argv[1:]))
