"""Command line driver: lex text or a file and print its tokens.

Usage:
    calclex "x := 2 * (y - 1)"
    calclex --file program.calc
    calclex --json --keep-going "a ? b"

Each token is printed with its debug representation. The first lexical
error is printed as ``Error <message> at position <pos>`` and ends the run
unless ``--keep-going`` is given. With ``--json`` the error is also emitted
as a JSON object on stdout and the error line goes to stderr.

Exit status:
    0  source lexed without errors
    1  at least one lexical error
    2  input file could not be read
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from calclex.config import LexConfig, lex_config_context
from calclex.lexer import Lexer
from calclex.serialization import to_dict
from calclex.tokens import TokenType
from calclex.utils.logger import get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calclex",
        description="Lex an arithmetic/assignment program and print its tokens.",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "-t",
        "--text",
        dest="file",
        action="store_false",
        help="Treat INPUT as source text (default)",
    )
    mode.add_argument(
        "-f",
        "--file",
        dest="file",
        action="store_true",
        help="Treat INPUT as a path and lex the file's contents",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON object per token; error lines go to stderr",
    )
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Continue after lexical errors instead of stopping at the first",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )
    parser.add_argument("input", metavar="INPUT", help="Source text or file path")
    parser.set_defaults(file=False)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )

    source_file: str | None = None
    if args.file:
        path = Path(args.input)
        try:
            source = path.read_text(encoding="utf-8")
        except OSError as e:
            print(f"Cannot read {path}: {e.strerror or e}", file=sys.stderr)
            return 2
        source_file = str(path)
        logger.debug("Lexing %s (%d characters)", path, len(source))
    else:
        source = args.input

    config = LexConfig(stop_on_error=not args.keep_going)
    errors = 0
    with lex_config_context(config):
        for token in Lexer(source, source_file=source_file).tokenize():
            if token.type is TokenType.ERROR:
                errors += 1
                line = f"Error {token.message} at position {token.pos}"
                if args.json:
                    # stdout stays one JSON object per line
                    print(json.dumps(to_dict(token), sort_keys=True))
                    print(line, file=sys.stderr)
                else:
                    print(line)
            elif args.json:
                print(json.dumps(to_dict(token), sort_keys=True))
            else:
                print(repr(token))

    if errors:
        logger.debug("%d lexical error(s)", errors)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
