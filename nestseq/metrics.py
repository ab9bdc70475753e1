"""Structural measurements used by the round-trip invariants."""

from __future__ import annotations

from nestseq import config
from nestseq.core.structure import Seq


def count_atoms(s: Seq, _depth: int = 0) -> int:
    """Number of atoms anywhere inside s."""
    config.check_depth(_depth)
    n = 0
    for elem in s:
        if isinstance(elem, Seq):
            n += count_atoms(elem, _depth + 1)
        else:
            n += 1
    return n


def nesting_depth(s: Seq, _depth: int = 0) -> int:
    """
    How many levels of Seq sit below s.

    0 for a sequence with no nested sequences (including NIL),
    1 for seq(seq()), and so on.
    """
    config.check_depth(_depth)
    deepest = 0
    for elem in s:
        if isinstance(elem, Seq):
            deepest = max(deepest, 1 + nesting_depth(elem, _depth + 1))
    return deepest
