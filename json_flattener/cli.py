"""Command-line interface for flattening JSON and exporting it as CSV."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .constants import DEFAULT_CSV_SEPARATOR, DEFAULT_VALUE_SEPARATOR
from .document import JsonFlattener
from .errors import JsonFlattenerError, SourceUnreadableError

logger = logging.getLogger(__name__)


def _read_input(path: str | None) -> str:
    if not path or path == "-":
        return sys.stdin.read()
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnreadableError(f"Cannot read {path}: {e}") from e


def _write_output(path: Path | None, text: str) -> None:
    if path is None:
        sys.stdout.write(text)
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("input", nargs="?", default="-", help="Input JSON file path or '-' for stdin.")
    parser.add_argument("--output", type=Path, help="Write the result to this file instead of stdout.")
    parser.add_argument(
        "--remove-nodes",
        action="store_true",
        help="Leave out the {object} and {array} entries of container nodes.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log debug details to stderr.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="json-flattener", description="Flatten JSON documents and export them as CSV.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    flat_parser = subparsers.add_parser("flat", help="Dump every path of the document with its value")
    _add_common_args(flat_parser)
    flat_parser.add_argument(
        "--value-separator",
        default=DEFAULT_VALUE_SEPARATOR,
        help="String between a path and its value.",
    )
    flat_parser.add_argument("--replace-eol", help="Replace newlines inside values with this string.")

    csv_parser = subparsers.add_parser("csv", help="One CSV record per element of the entry path")
    _add_common_args(csv_parser)
    csv_parser.add_argument("--entry", required=True, help="Entry path, e.g. /orders/items.")
    csv_parser.add_argument(
        "--property",
        dest="properties",
        action="append",
        default=[],
        help="Property path relative to the entry ('.', 'id', '../name'). Repeatable.",
    )
    csv_parser.add_argument("--separator", default=DEFAULT_CSV_SEPARATOR, help="CSV column separator.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(message)s",
    )

    try:
        flattener = JsonFlattener(_read_input(args.input))
        flattener.parse(remove_nodes=args.remove_nodes)
        if args.command == "flat":
            result = flattener.flat_tree(args.value_separator, args.replace_eol)
        else:
            result = flattener.to_csv(args.entry, args.properties, args.separator)
    except JsonFlattenerError as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    _write_output(args.output, result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
