"""
Traversal primitives over nested sequences.

    rightmost(s)            last atom in left-to-right depth-first order
    deepest_atom(s)         leftmost atom among those nested deepest
    deepest_atom_search(s)  same search, also returning the depth found

Both return EMPTY when the structure holds no atoms (e.g. NIL or a Seq of
empty Seqs). Depth is counted from the call root: the root's own elements
are at depth 0.
"""

from __future__ import annotations

from typing import Any

from nestseq import config
from nestseq.core.markers import EMPTY
from nestseq.core.structure import Seq


def _require_seq(s: Any, op: str) -> None:
    if not isinstance(s, Seq):
        raise TypeError(f"{op} expects a Seq, got {type(s).__name__}")


def rightmost(s: Seq) -> Any:
    """
    Return the last atom of s in reading order, or EMPTY.

    Later siblings are examined before earlier ones, and a nested sequence
    is only entered when nothing to its right produced an atom. Each
    element is looked at once at most.
    """
    _require_seq(s, "rightmost")
    return _rightmost(s, 0)


def _rightmost(s: Seq, depth: int) -> Any:
    config.check_depth(depth)
    for elem in reversed(list(s)):
        if not isinstance(elem, Seq):
            return elem
        if elem.is_empty:
            continue
        found = _rightmost(elem, depth + 1)
        if found is not EMPTY:
            return found
    return EMPTY


def deepest_atom_search(s: Any) -> tuple[Any, int]:
    """
    Depth-tagged search for the deepest atom.

    Returns:
        (atom, depth) for the leftmost atom among those at maximal depth,
        (EMPTY, -1) when s holds no atom,
        (s, 0) when s is itself a bare atom.
    """
    if not isinstance(s, Seq):
        return s, 0
    return _search(s, 0)


def _search(s: Seq, depth: int) -> tuple[Any, int]:
    config.check_depth(depth)
    best, best_depth = EMPTY, -1
    for elem in s:
        if isinstance(elem, Seq):
            found, found_depth = _search(elem, depth + 1)
        else:
            found, found_depth = elem, depth
        # strict: an earlier result keeps the spot on ties
        if found_depth > best_depth:
            best, best_depth = found, found_depth
    return best, best_depth


def deepest_atom(s: Any) -> Any:
    """Return the leftmost of the most deeply nested atoms in s, or EMPTY."""
    atom, _depth = deepest_atom_search(s)
    return atom
