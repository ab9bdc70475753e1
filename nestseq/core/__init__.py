from .markers import OPEN, CLOSE, EMPTY, is_marker, is_reserved
from .structure import Seq, NIL, cons, seq, is_atom, is_seq, from_py, to_py

__all__ = [
    "OPEN", "CLOSE", "EMPTY", "is_marker", "is_reserved",
    "Seq", "NIL", "cons", "seq", "is_atom", "is_seq", "from_py", "to_py",
]
