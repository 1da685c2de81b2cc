"""Shared constants for the prefixtree package."""

import os

LOG_FORMAT = "[%(levelname)s] %(message)s"

# Word-list files tried in order when no explicit path is given
DEFAULT_WORDLIST_PATHS = (
    "words.txt",
    "wordlist.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "words.txt"),
    "/usr/share/dict/words",
)

# Lines starting with this are skipped when reading word lists
COMMENT_PREFIX = "#"

# Built-in fallback when no word list can be found
SAMPLE_WORDS = (
    "a", "an", "and", "ant", "any",
    "car", "card", "care", "cart", "cat",
    "do", "dog", "doll", "doom", "door",
    "tea", "ten", "to", "tool", "toy",
)

# Structural dump
ROOT_GLYPH = "."
INDENT = "  "
TERMINAL_MARK = " *"
