# nestseq/pretty.py
"""
Pretty-print helpers for Seq.

This does NOT change Seq.__repr__. It gives a more compact, s-expression
style rendering for humans:

    from nestseq import seq, pretty_seq
    print(pretty_seq(seq(1, seq(2, 3), seq())))     # (1 (2 3) ())

You can control depth / width via keyword arguments.
"""

from __future__ import annotations

from typing import Any

from nestseq.core.markers import OPEN, CLOSE, EMPTY
from nestseq.core.structure import Seq
from nestseq.numbering import Tagged


def _atom_text(x: Any) -> str:
    if x is OPEN:
        return "⟨"
    if x is CLOSE:
        return "⟩"
    if x is EMPTY:
        return "∅"
    if isinstance(x, Tagged):
        return f"#{x.index}:{_atom_text(x.atom)}"
    if isinstance(x, str):
        return x if x and " " not in x and "(" not in x and ")" not in x else repr(x)
    return repr(x)


def pretty_seq(s: Any, *, max_depth: int = 6, max_width: int = 8) -> str:
    """Render s as ``(a b (c))``.

    Conventions
    -----------
    * The empty sequence is ``()``.
    * OPEN / CLOSE tokens are ``⟨`` and ``⟩``; EMPTY is ``∅``.
    * Tagged atoms are ``#index:atom``.
    * Plain strings without spaces or parentheses are shown bare.

    Parameters
    ----------
    s:
        Seq (or atom) to render.
    max_depth:
        Sequences nested deeper than this render as ``…``.
    max_width:
        Max number of elements shown per sequence; the rest collapse into ``…``.
    """

    def rec(node: Any, depth: int) -> str:
        if not isinstance(node, Seq):
            return _atom_text(node)
        if depth > max_depth:
            return "…"

        items: list[str] = []
        for idx, child in enumerate(node):
            if idx >= max_width:
                items.append("…")
                break
            items.append(rec(child, depth + 1))
        return "(" + " ".join(items) + ")"

    return rec(s, 0)
