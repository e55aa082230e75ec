"""Command-line interface: compare two text files line by line."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from list_diff.api import compare_text
from list_diff.options import NormalizationOptions
from list_diff.result import ComparisonResult
from list_diff.text import join_lines

LOGGER = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

SECTIONS = {
    "a-only": "a_only",
    "b-only": "b_only",
    "intersection": "intersection",
    "union": "union",
}


def read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read().removeprefix("\ufeff")
    # utf-8-sig drops a leading byte-order mark
    with open(path, "r", encoding="utf-8-sig") as file:
        return file.read()


def options_from_args(args: argparse.Namespace) -> NormalizationOptions:
    return NormalizationOptions(
        case_sensitive=args.case_sensitive,
        ignore_begin_end_spaces=not args.keep_edge_spaces,
        ignore_extra_spaces=args.ignore_extra_spaces,
    )


def render(result: ComparisonResult, out: TextIO) -> None:
    for index, (title, items) in enumerate(result.sections()):
        if index:
            out.write("\n")
        out.write(f"{title} ({len(items)})\n")
        out.write(join_lines(items) + "\n" if items else "(no items)\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="list-diff",
        description="Compare two lists and find unique and common items.",
    )
    parser.add_argument("file_a", help="List A, one item per line ('-' for stdin)")
    parser.add_argument("file_b", help="List B, one item per line ('-' for stdin)")
    parser.add_argument("--case-sensitive", action="store_true")
    parser.add_argument(
        "--keep-edge-spaces",
        action="store_true",
        help="Do not ignore leading/trailing spaces",
    )
    parser.add_argument("--ignore-extra-spaces", action="store_true")
    parser.add_argument("--swap", action="store_true", help="Swap A and B")
    parser.add_argument(
        "--section",
        choices=sorted(SECTIONS),
        help="Print only this list, newline-joined",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
    )
    return parser


def run(argv: Sequence[str] | None = None, out: TextIO | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    out = out if out is not None else sys.stdout

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.file_a == "-" and args.file_b == "-":
        parser.error("only one of FILE_A and FILE_B may be '-'")

    try:
        text_a = read_source(args.file_a)
        text_b = read_source(args.file_b)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"list-diff: {exc}", file=sys.stderr)
        return 2

    if args.swap:
        text_a, text_b = text_b, text_a

    options = options_from_args(args)
    LOGGER.info("Comparing %s and %s with %s", args.file_a, args.file_b, options)
    result = compare_text(text_a, text_b, options=options)

    if args.section:
        items = getattr(result, SECTIONS[args.section])
        if items:
            out.write(join_lines(items) + "\n")
    else:
        render(result, out)
    return 0


def main() -> None:
    raise SystemExit(run())


if __name__ == "__main__":
    main()
