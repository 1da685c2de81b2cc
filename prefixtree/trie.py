"""Prefix trie with exact and prefix-scoped removal."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

log = logging.getLogger("prefixtree")


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_terminal")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = False

    def __repr__(self) -> str:
        mark = "*" if self.is_terminal else ""
        return f"TrieNode({''.join(self.children)!r}{mark})"


class Trie:
    """Prefix trie over strings, one code point per edge.

    The root stands for the empty string and is never terminal, so ``""``
    can be neither inserted nor found.  The number of stored strings is
    cached; ``remove_prefix`` drops the cache and the next ``size()`` call
    recounts.
    """

    def __init__(self):
        self.root = TrieNode()
        self._size: int | None = 0

    @classmethod
    def from_iterable(cls, words: Iterable[str]) -> Trie:
        """Build a trie holding every string of *words*."""
        trie = cls()
        trie.update(words)
        return trie

    # size

    def size(self) -> int:
        """Number of stored strings."""
        if self._size is None:
            count = 0
            stack = [self.root]
            while stack:
                node = stack.pop()
                if node.is_terminal:
                    count += 1
                stack.extend(node.children.values())
            self._size = count
        return self._size

    def is_empty(self) -> bool:
        return not self.root.children

    def clear(self) -> None:
        self.root.children.clear()
        self._size = 0

    # mutation

    def insert(self, word: str) -> bool:
        """Store *word*.  Returns False if it was empty or already present."""
        if not word:
            return False
        node = self.root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = TrieNode()
            node = child
        if node.is_terminal:
            return False
        node.is_terminal = True
        if self._size is not None:
            self._size += 1
        return True

    def update(self, words: Iterable[str]) -> int:
        """Insert every string of *words*; returns how many were new."""
        return sum(1 for w in words if self.insert(w))

    def remove(self, word: str) -> bool:
        """Remove *word*, pruning the branch that only it was using."""
        if not word:
            return False
        found = self._trace(word)
        if found is None:
            return False
        path, cut = found
        node = path[-1]
        if not node.is_terminal:
            return False
        node.is_terminal = False
        if not node.children:
            log.debug("remove %r: pruning below %r", word, word[:cut])
            del path[cut].children[word[cut]]
        if self._size is not None:
            self._size -= 1
        return True

    def remove_prefix(self, prefix: str) -> bool:
        """Remove every stored string starting with *prefix*."""
        if not prefix:
            return False
        found = self._trace(prefix)
        if found is None:
            return False
        path, cut = found
        log.debug("remove_prefix %r: pruning below %r", prefix, prefix[:cut])
        del path[cut].children[prefix[cut]]
        self._size = None
        return True

    def _trace(self, s: str) -> tuple[list[TrieNode], int] | None:
        """Walk the path for *s*, finding where its private branch starts.

        Returns the nodes along the path (root first, the node for *s*
        last) and the cut index ``i``: deleting ``path[i].children[s[i]]``
        drops only nodes that are neither terminal nor shared with another
        branch.  The node for *s* itself is not inspected.  Returns None
        if the path does not exist.
        """
        path = [self.root]
        cut: int | None = None
        node = self.root
        for i, ch in enumerate(s):
            if node.is_terminal or len(node.children) > 1:
                cut = None
            if cut is None:
                cut = i
            node = node.children.get(ch)
            if node is None:
                return None
            path.append(node)
        return path, cut

    # queries

    def contains(self, word: str) -> bool:
        if not word:
            return False
        node = self._walk(word)
        return node is not None and node.is_terminal

    def contains_prefix(self, prefix: str) -> bool:
        """True if some path spells *prefix*.  The empty prefix always matches."""
        return self._walk(prefix) is not None

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    # enumeration

    def to_list(self) -> list[str]:
        return list(self._words_below(self.root, ""))

    def to_list_prefix(self, prefix: str) -> list[str]:
        """Stored strings starting with *prefix*, *prefix* included if stored."""
        if not prefix:
            return []
        node = self._walk(prefix)
        if node is None:
            return []
        words = [prefix] if node.is_terminal else []
        words.extend(self._words_below(node, prefix))
        return words

    @staticmethod
    def _words_below(start: TrieNode, prefix: str) -> Iterator[str]:
        """Depth-first over the strict descendants of *start*."""
        buf = list(prefix)
        base = len(buf)
        stack = [(ch, child, base) for ch, child in start.children.items()]
        stack.reverse()
        while stack:
            ch, node, depth = stack.pop()
            del buf[depth:]
            buf.append(ch)
            if node.is_terminal:
                yield "".join(buf)
            stack.extend(
                (c, n, depth + 1) for c, n in reversed(node.children.items())
            )

    # protocol

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __iter__(self) -> Iterator[str]:
        return self._words_below(self.root, "")

    def __repr__(self) -> str:
        size = "?" if self._size is None else self._size
        return f"<{type(self).__name__} size={size}>"

    def __str__(self) -> str:
        from prefixtree.display import render_tree

        return render_tree(self)
