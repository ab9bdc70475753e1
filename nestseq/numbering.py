"""
Arithmetic numbering of atoms.

sequence_atoms(s, initial, increment) rebuilds s with the k-th atom
(left-to-right, depth-first, k = 0, 1, 2, ...) replaced by
Tagged(initial + k * increment, atom). Nesting is unchanged.

The running index is passed into each call and handed back with the
rebuilt structure, so a nested sequence reports how far it advanced the
count and its following siblings continue from there.
"""

from __future__ import annotations

from typing import Any, NamedTuple

from nestseq import config
from nestseq.core.structure import Seq


class Tagged(NamedTuple):
    """An atom paired with its sequence number."""
    index: int
    atom: Any


def _check_int(value: Any, name: str) -> None:
    # bool is an int subclass, but True/False as an index is almost always a bug.
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def number_aux(s: Seq, next_index: int, increment: int = 1, _depth: int = 0) -> tuple[Seq, int]:
    """
    Number the atoms of s starting at next_index.

    Returns:
        (tagged, after): tagged has the shape of s; after is the index the
        next atom following s should receive.
    """
    config.check_depth(_depth)
    items: list[Any] = []
    index = next_index
    for elem in s:
        if isinstance(elem, Seq):
            tagged, index = number_aux(elem, index, increment, _depth + 1)
            items.append(tagged)
        else:
            items.append(Tagged(index, elem))
            index += increment
    return Seq.from_iterable(items), index


def sequence_atoms(s: Seq, initial: int = 0, increment: int = 1) -> Seq:
    """Return s with every atom replaced by Tagged(index, atom)."""
    if not isinstance(s, Seq):
        raise TypeError(f"sequence_atoms expects a Seq, got {type(s).__name__}")
    _check_int(initial, "initial")
    _check_int(increment, "increment")
    tagged, _after = number_aux(s, initial, increment)
    return tagged
