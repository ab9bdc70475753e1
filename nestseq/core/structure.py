"""
Structure model for nestseq.

Design:
-------
* A sequence is a persistent cons list:
      NIL             -> the empty sequence
      cons(h, t)      -> Seq with head h and tail t (t shared, never copied)

* An element is either an atom (any value that is not a Seq and not one of
  OPEN / CLOSE / EMPTY) or a nested Seq.

* Nothing here mutates a Seq after construction. Cycles are impossible
  through cons(); from_py() rejects cyclic Python input.

Siblings are always walked with loops, so long sequences never touch the
Python call stack. Only nesting (a Seq inside a Seq) costs a frame.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from nestseq import config
from nestseq.core.markers import is_reserved

Atom = Any  # Actually: any value that is neither a Seq nor OPEN / CLOSE / EMPTY

_NO_HEAD = object()


class Seq:
    """Immutable linked sequence of atoms and nested sequences."""

    __slots__ = ("_head", "_tail")

    def __init__(self, head: Any = _NO_HEAD, tail: Seq | None = None) -> None:
        # Prefer NIL / cons() / seq(). tail=None marks the empty sequence.
        if tail is None:
            if head is not _NO_HEAD:
                raise TypeError("an empty Seq takes no head; use seq(head) or cons(head, NIL)")
            head = None
        elif not isinstance(tail, Seq):
            raise TypeError(f"tail must be Seq, got {type(tail).__name__}")
        self._head = head
        self._tail = tail

    # ---------- constructors ----------

    @staticmethod
    def cons(head: Any, tail: Seq) -> Seq:
        """O(1) prepend."""
        return Seq(head, tail)

    @staticmethod
    def from_iterable(items: Iterable[Any]) -> Seq:
        """O(N). Build a one-level Seq; items are used as-is."""
        acc = NIL
        for item in reversed(list(items)):
            acc = Seq(item, acc)
        return acc

    # ---------- primitive queries ----------

    @property
    def is_empty(self) -> bool:
        return self._tail is None

    @property
    def head(self) -> Any:
        if self._tail is None:
            raise IndexError("head of empty Seq")
        return self._head

    @property
    def tail(self) -> Seq:
        if self._tail is None:
            raise IndexError("tail of empty Seq")
        return self._tail

    # ---------- python protocol ----------

    def __iter__(self) -> Iterator[Any]:
        cur = self
        while cur._tail is not None:
            yield cur._head
            cur = cur._tail

    def __len__(self) -> int:
        n = 0
        cur = self
        while cur._tail is not None:
            n += 1
            cur = cur._tail
        return n

    def __bool__(self) -> bool:
        return self._tail is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Seq):
            return NotImplemented
        a, b = self, other
        while True:
            if a is b:
                return True
            if a._tail is None or b._tail is None:
                return a._tail is None and b._tail is None
            if a._head != b._head:
                return False
            a, b = a._tail, b._tail

    def __hash__(self) -> int:
        return hash(("Seq",) + tuple(self))

    def __repr__(self) -> str:
        return "seq(" + ", ".join(repr(x) for x in self) + ")"


NIL = Seq()


def cons(head: Any, tail: Seq) -> Seq:
    """Cons cell: head prepended to tail."""
    return Seq.cons(head, tail)


def seq(*items: Any) -> Seq:
    """Build a Seq from positional elements: seq(1, seq(2, 3))."""
    return Seq.from_iterable(items)


# ---------------------------------------------------------------------------
# Discriminators
# ---------------------------------------------------------------------------

def is_seq(x: Any) -> bool:
    return isinstance(x, Seq)


def is_atom(x: Any) -> bool:
    """An atom is anything that is neither a Seq nor OPEN / CLOSE / EMPTY."""
    return not isinstance(x, Seq) and not is_reserved(x)


# ---------------------------------------------------------------------------
# Python list <-> Seq bridges
# ---------------------------------------------------------------------------

def from_py(value: list[Any], _seen: frozenset[int] = frozenset(), _depth: int = 0) -> Seq:
    """
    Convert nested Python lists into nested Seq values.

    Only ``list`` nests; tuples, dicts and everything else are atoms.
    Seq values found inside are kept as-is.

    Raises:
        TypeError: value is not a list, or an element is OPEN / CLOSE / EMPTY.
        ValueError: the list contains itself (directly or transitively).
        DepthOverflowError: nesting is deeper than config.max_depth().
    """
    if not isinstance(value, list):
        raise TypeError(f"from_py expects a list, got {type(value).__name__}")
    config.check_depth(_depth)

    value_id = id(value)
    if value_id in _seen:
        raise ValueError("Circular reference detected in from_py input")
    _seen = _seen | {value_id}

    items = []
    for item in value:
        if isinstance(item, list):
            items.append(from_py(item, _seen, _depth + 1))
        elif is_reserved(item):
            raise TypeError(f"from_py: {item!r} cannot be used as an atom")
        else:
            items.append(item)
    return Seq.from_iterable(items)


def to_py(s: Seq, _depth: int = 0) -> list[Any]:
    """Convert a Seq back into nested Python lists; atoms are returned as-is."""
    if not isinstance(s, Seq):
        raise TypeError(f"to_py expects a Seq, got {type(s).__name__}")
    config.check_depth(_depth)
    return [to_py(x, _depth + 1) if isinstance(x, Seq) else x for x in s]
