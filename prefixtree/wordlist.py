"""Word lists loaded into a trie."""

from __future__ import annotations

import logging
import os
from typing import Iterator

from prefixtree.constants import COMMENT_PREFIX, DEFAULT_WORDLIST_PATHS, SAMPLE_WORDS
from prefixtree.trie import Trie

log = logging.getLogger("prefixtree.wordlist")


def read_words(path: str) -> Iterator[str]:
    """Stripped, non-empty, non-comment lines of a UTF-8 text file."""
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip()
            if word and not word.startswith(COMMENT_PREFIX):
                yield word


class WordList:
    """Trie filled from the first usable word-list file."""

    def __init__(self, path: str | None = None, fallback: bool = True):
        self.trie = Trie()
        self.source: str | None = None
        self._load(path, fallback)

    def _load(self, path: str | None, fallback: bool) -> None:
        if path:
            # an explicit file must exist; read errors go to the caller
            self._load_file(path)
            if self.trie:
                return
            log.warning("No words found in %s", path)

        for candidate in DEFAULT_WORDLIST_PATHS:
            if os.path.exists(candidate):
                self._load_file(candidate)
                if self.trie:
                    return

        if fallback:
            log.warning("No word list found -- using built-in sample words.")
            self.trie.update(SAMPLE_WORDS)
            self.source = "<sample>"

    def _load_file(self, path: str) -> None:
        added = self.trie.update(read_words(path))
        if added:
            self.source = path
            log.info("Loaded %s words from %s", f"{added:,}", path)

    def complete(self, prefix: str, limit: int | None = None) -> list[str]:
        """Sorted stored words starting with *prefix*."""
        words = sorted(self.trie.to_list_prefix(prefix))
        return words if limit is None else words[:limit]

    def __contains__(self, word: object) -> bool:
        return word in self.trie

    def __len__(self) -> int:
        return len(self.trie)
