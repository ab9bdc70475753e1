"""
Sentinels shared across nestseq.

OPEN / CLOSE are the bracket tokens of a destructured token stream.
EMPTY is what rightmost() and deepest_atom() return when a structure
holds no atoms at all. None of them is ever a valid atom; is_reserved()
is the check used wherever atoms enter a structure.
"""

from __future__ import annotations


class _Marker:
    """Bracket token in a token stream."""
    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return self._name

    def __reduce__(self):
        # Unpickle to the module-level singleton, not a copy.
        return self._name


class _Empty:
    """Sentinel indicating a search found no atom."""
    __slots__ = ()

    def __repr__(self) -> str:
        return "EMPTY"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return "EMPTY"


OPEN = _Marker("OPEN")
CLOSE = _Marker("CLOSE")
EMPTY = _Empty()


def is_marker(x: object) -> bool:
    """True for OPEN and CLOSE."""
    return x is OPEN or x is CLOSE


def is_reserved(x: object) -> bool:
    """True for OPEN, CLOSE and EMPTY: values that may never be stored as atoms."""
    return x is OPEN or x is CLOSE or x is EMPTY
