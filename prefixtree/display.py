"""Structural dump of a trie for debugging."""

from __future__ import annotations

from typing import TYPE_CHECKING

from prefixtree.constants import INDENT, ROOT_GLYPH, TERMINAL_MARK

if TYPE_CHECKING:
    from prefixtree.trie import Trie


def render_tree(trie: "Trie") -> str:
    """One line per node, children sorted by edge label.

    Each level is indented by ``INDENT`` and terminal nodes carry
    ``TERMINAL_MARK``::

        .
          c
            a
              r *
              t *
    """
    lines = [ROOT_GLYPH]
    stack = [(ch, node, 1) for ch, node in sorted(trie.root.children.items(), reverse=True)]
    while stack:
        ch, node, depth = stack.pop()
        mark = TERMINAL_MARK if node.is_terminal else ""
        lines.append(f"{INDENT * depth}{ch}{mark}")
        stack.extend(
            (c, n, depth + 1) for c, n in sorted(node.children.items(), reverse=True)
        )
    return "\n".join(lines)


def node_count(trie: "Trie") -> int:
    """Number of nodes below the root."""
    count = 0
    stack = list(trie.root.children.values())
    while stack:
        node = stack.pop()
        count += 1
        stack.extend(node.children.values())
    return count


def summary(trie: "Trie") -> str:
    words = trie.size()
    nodes = node_count(trie)
    return f"{words:,} word{'s' if words != 1 else ''}, {nodes:,} node{'s' if nodes != 1 else ''}"
