# nestseq/__init__.py
"""
nestseq public API surface.

This module exposes a small, coherent core over arbitrarily nested,
immutable linked sequences:

    - Structure: Seq, NIL, cons, seq, is_atom, is_seq, from_py, to_py
    - Markers: OPEN, CLOSE, EMPTY
    - Traversal: rightmost, deepest_atom, deepest_atom_search
    - Numbering: Tagged, sequence_atoms, number_aux
    - Codec: destructure, restructure, parse_aux, is_well_formed
    - Metrics / pretty: count_atoms, nesting_depth, pretty_seq
    - Errors: NestSeqError, MalformedStreamError, DepthOverflowError
"""

from __future__ import annotations

from .errors import NestSeqError, MalformedStreamError, DepthOverflowError
from . import config
from .core.markers import OPEN, CLOSE, EMPTY, is_marker, is_reserved
from .core.structure import Seq, NIL, cons, seq, is_atom, is_seq, from_py, to_py

# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------

from .traversal import rightmost, deepest_atom, deepest_atom_search
from .numbering import Tagged, sequence_atoms, number_aux
from .codec import destructure, restructure, parse_aux, is_well_formed
from .metrics import count_atoms, nesting_depth
from .pretty import pretty_seq


__all__ = [
    # errors
    "NestSeqError",
    "MalformedStreamError",
    "DepthOverflowError",

    # config
    "config",

    # structure
    "Seq",
    "NIL",
    "cons",
    "seq",
    "is_atom",
    "is_seq",
    "from_py",
    "to_py",

    # markers
    "OPEN",
    "CLOSE",
    "EMPTY",
    "is_marker",
    "is_reserved",

    # traversal
    "rightmost",
    "deepest_atom",
    "deepest_atom_search",

    # numbering
    "Tagged",
    "sequence_atoms",
    "number_aux",

    # codec
    "destructure",
    "restructure",
    "parse_aux",
    "is_well_formed",

    # metrics / pretty
    "count_atoms",
    "nesting_depth",
    "pretty_seq",
]
