"""CLI / terminal mode for prefixtree."""

from __future__ import annotations

from prefixtree.display import render_tree, summary
from prefixtree.trie import Trie

_HELP = """\
Commands:
  add WORD [WORD ...]   -- insert words           (e.g. add car cart)
  del WORD              -- remove one word
  delp PREFIX           -- remove every word starting with PREFIX
  has WORD              -- is WORD stored?
  pre PREFIX            -- is PREFIX a path in the trie?
  ls [PREFIX]           -- list words (optionally under PREFIX)
  size                  -- number of stored words
  show                  -- print the tree
  clear                 -- remove everything
  help                  -- show this text
  done                  -- leave the shell"""


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


def execute(trie: Trie, line: str) -> str | None:
    """Run one shell command against *trie* and return the text to print.

    Returns None for ``done``.
    """
    parts = line.split()
    if not parts:
        return ""
    cmd, args = parts[0].lower(), parts[1:]

    if cmd == "done":
        return None
    if cmd == "help":
        return _HELP
    if cmd == "show":
        return render_tree(trie)
    if cmd == "size":
        return summary(trie)
    if cmd == "clear":
        trie.clear()
        return "  Trie cleared."

    if cmd == "add" and args:
        added = [w for w in args if trie.insert(w)]
        skipped = len(args) - len(added)
        msg = f"  Added {len(added)}"
        if skipped:
            msg += f" ({skipped} already present)"
        return msg
    if cmd == "ls" and len(args) <= 1:
        words = sorted(trie.to_list_prefix(args[0]) if args else trie.to_list())
        if not words:
            return "  (none)"
        return "\n".join(f"  {w}" for w in words)
    if len(args) == 1:
        arg = args[0]
        if cmd == "del":
            return f"  Removed '{arg}'" if trie.remove(arg) else f"  '{arg}' not found"
        if cmd == "delp":
            return (f"  Removed everything under '{arg}'" if trie.remove_prefix(arg)
                    else f"  No words under '{arg}'")
        if cmd == "has":
            return f"  {_yes_no(trie.contains(arg))}"
        if cmd == "pre":
            return f"  {_yes_no(trie.contains_prefix(arg))}"

    return "  Unknown command.  Type 'help' for the list."


def run_shell(trie: Trie | None = None) -> Trie:
    """Interactive read-eval-print loop; returns the trie when done."""
    if trie is None:
        trie = Trie()
    print("\n" + "=" * 60)
    print("  PREFIXTREE -- Interactive Shell")
    print("=" * 60)
    print()
    print(_HELP)
    print()

    while True:
        try:
            inp = input("  trie> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        out = execute(trie, inp)
        if out is None:
            break
        if out:
            print(out)

    print()
    print(f"Final: {summary(trie)}")
    return trie


def run_demo() -> Trie:
    """Insert a few overlapping words, remove the shortest, print the result."""
    trie = Trie()
    for word in ("PWD", "PWDL", "PWDLA"):
        trie.insert(word)
    trie.remove("PWD")

    print(render_tree(trie))
    print()
    print(f"Words: {', '.join(sorted(trie.to_list()))}")
    print(summary(trie))
    return trie
