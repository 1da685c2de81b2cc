"""prefixtree -- prefix trie with exact and prefix-scoped removal."""

from prefixtree.display import node_count, render_tree, summary
from prefixtree.trie import Trie, TrieNode
from prefixtree.wordlist import WordList, read_words

__all__ = [
    "Trie",
    "TrieNode",
    "WordList",
    "node_count",
    "read_words",
    "render_tree",
    "summary",
]
