#!/usr/bin/env python3
"""
prefixtree shell

Interactive terminal front end for the prefix trie: insert, remove,
query and list words, or run a short demo.
"""

from __future__ import annotations

import argparse
import logging

from prefixtree.cli import run_demo, run_shell
from prefixtree.constants import LOG_FORMAT
from prefixtree.trie import Trie
from prefixtree.wordlist import WordList

log = logging.getLogger("prefixtree")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="prefixtree -- interactive prefix trie shell",
    )
    parser.add_argument("--words", type=str, default=None,
                        help="Path to a word list to load before the shell starts")
    parser.add_argument("--demo", action="store_true",
                        help="Run the short demo instead of the shell")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.demo:
        run_demo()
        return

    trie = Trie()
    if args.words:
        try:
            trie = WordList(args.words).trie
        except (OSError, UnicodeDecodeError) as exc:
            log.error("Cannot read word list %s: %s", args.words, exc)
            raise SystemExit(1)
    log.debug("Starting shell with %d words", len(trie))
    run_shell(trie)


if __name__ == "__main__":
    main()
