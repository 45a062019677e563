#!/usr/bin/env python3
"""
Command line entry point
Looks up each word given on the command line and prints its definitions
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from .config import LookupConfig, validate_config
from .console import make_console, setup_windows_console
from .errors import DictionaryLookupError
from .lookup import lookup_all
from .ranking import group_by_dictionary
from .renderer import render, render_word_banner

logger = logging.getLogger(__name__)

USAGE_HINT = "Provide a word to lookup."
NO_DEFINITIONS = "No definitions found."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='dictlookup',
        description='Look up word definitions on Wordnik',
    )
    parser.add_argument('words', nargs='*', metavar='WORD', help='Words to look up')
    parser.add_argument('--plain', action='store_true',
                        help='Print without colors or emphasis')
    parser.add_argument('--keep-going', action='store_true',
                        help='Print the words that succeeded even when others fail')
    parser.add_argument('--timeout', type=float, default=None, metavar='SECONDS',
                        help='Request timeout in seconds')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Log progress to stderr (repeat for debug output)')
    return parser


def configure_logging(verbosity: int, conf: LookupConfig) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = getattr(logging, conf.LOGGING['level'])
    logging.basicConfig(level=level, format=conf.LOGGING['format'], stream=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)

    if not args.words:
        print(USAGE_HINT)
        return 0

    setup_windows_console()
    styled = not args.plain
    out = make_console(styled)
    err = make_console(styled, stderr=True)

    try:
        conf = LookupConfig.from_env()
        if args.timeout is not None:
            conf.timeout = args.timeout
        validate_config(conf)
        configure_logging(args.verbose, conf)

        logger.info(f"Looking up {len(args.words)} words")
        outcomes = asyncio.run(lookup_all(args.words, conf=conf, fail_fast=not args.keep_going))
    except (DictionaryLookupError, ValueError) as e:
        err.print(f"[ERROR] {e}", markup=False)
        return 1

    exit_code = 0
    for outcome in outcomes:
        if not outcome.ok:
            err.print(f"[ERROR] {outcome.word}: {outcome.error}", markup=False)
            exit_code = 1
            continue

        out.print(render_word_banner(outcome.word, styled))
        grouped = group_by_dictionary(outcome.definitions)
        if grouped:
            out.print(render(grouped, styled), end='')
        else:
            out.print(NO_DEFINITIONS)
            out.print()

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
