"""Command-line entry point.

Usage:
    pugjsx                      # Compile ./target.json
    pugjsx page.json            # Compile a pug-parser JSON AST
    pug-parse page.pug | pugjsx -
    pugjsx page.json --dump-ast # Also print the loaded tree to stderr

The input is the JSON tree pug-parser produces; lexing and parsing Pug
source happens upstream.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from pugjsx.compiler import Compiler
from pugjsx.exceptions import TranspileError
from pugjsx.nodes import dump_tree, load_file, load_tree

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = "target.json"

EXIT_OK = 0
EXIT_COMPILE_ERROR = 1
EXIT_INPUT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pugjsx",
        description="Compile a Vue-flavored pug-parser AST to JSX-like text",
    )
    parser.add_argument(
        "source",
        nargs="?",
        default=DEFAULT_SOURCE,
        help=f"pug-parser JSON AST file, or '-' for stdin (default: {DEFAULT_SOURCE})",
    )
    parser.add_argument("--dump-ast", action="store_true", help="Print the loaded tree to stderr")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.source == "-":
            tree = load_tree(sys.stdin.read())
        else:
            tree = load_file(args.source)
    except FileNotFoundError:
        print(f"pugjsx: no such file: {args.source}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    except json.JSONDecodeError as e:
        print(f"pugjsx: {args.source} is not valid JSON: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    except TranspileError as e:
        print(e.format_compact(), file=sys.stderr)
        return EXIT_COMPILE_ERROR

    if args.dump_ast:
        print(dump_tree(tree), file=sys.stderr)

    try:
        output = Compiler().compile(tree)
    except TranspileError as e:
        logger.debug("Compile failed", exc_info=True)
        print(e.format_compact(), file=sys.stderr)
        return EXIT_COMPILE_ERROR

    print(output)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
