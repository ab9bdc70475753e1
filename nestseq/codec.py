"""
Flatten / unflatten codec for nested sequences.

destructure(s) writes s as a flat token stream where explicit OPEN / CLOSE
tokens stand in for nesting:

    seq(1, seq(2, 3), seq())  ->  seq(OPEN, 1, OPEN, 2, 3, CLOSE, OPEN, CLOSE, CLOSE)

restructure(tokens) is its exact inverse:

    restructure(destructure(s)) == s        for every Seq s

Encoding appends to a single accumulator, so it is linear in the size of
s. Decoding is a one-token-lookahead recursive descent: each group returns
the elements it parsed together with the rest of the stream after its
CLOSE. Because the stream is a cons list, that rest is just a shared tail.

Streams that did not come from destructure() are rejected with
MalformedStreamError; nothing is guessed.
"""

from __future__ import annotations

import logging
from typing import Any

from nestseq import config
from nestseq.core.markers import OPEN, CLOSE, EMPTY, is_reserved
from nestseq.core.structure import Seq
from nestseq.errors import MalformedStreamError

logger = logging.getLogger(__name__)


# =============================================================================
# Encoder
# =============================================================================


def destructure(s: Seq) -> Seq:
    """
    Encode s as a token stream.

    Raises:
        TypeError: s is not a Seq, or one of its atoms is OPEN / CLOSE / EMPTY.
        DepthOverflowError: s nests deeper than config.max_depth().
    """
    if not isinstance(s, Seq):
        raise TypeError(f"destructure expects a Seq, got {type(s).__name__}")
    out: list[Any] = []
    _emit(s, out, 0)
    return Seq.from_iterable(out)


def _emit(s: Seq, out: list[Any], depth: int) -> None:
    config.check_depth(depth)
    out.append(OPEN)
    for elem in s:
        if isinstance(elem, Seq):
            _emit(elem, out, depth + 1)
        elif is_reserved(elem):
            raise TypeError(f"destructure: {elem!r} cannot appear as an atom")
        else:
            out.append(elem)
    out.append(CLOSE)


# =============================================================================
# Decoder
# =============================================================================


def parse_aux(stream: Seq) -> tuple[Seq, Seq]:
    """
    Parse one group from a stream whose leading OPEN was already dropped.

    Returns:
        (elements, remainder): the group's elements as a Seq, and the
        stream after the CLOSE that ended the group.

    Raises:
        MalformedStreamError: the stream runs out before the group closes,
            or holds a nested Seq or EMPTY as a token.
    """
    if not isinstance(stream, Seq):
        raise TypeError(f"parse_aux expects a Seq, got {type(stream).__name__}")
    elements, remainder, _pos = _parse_group(stream, 0, 0)
    return elements, remainder


def _parse_group(stream: Seq, pos: int, depth: int) -> tuple[Seq, Seq, int]:
    # pos is the index of stream.head within the full token stream
    config.check_depth(depth)
    items: list[Any] = []
    cur = stream
    while True:
        if cur.is_empty:
            logger.debug("token stream ended inside a group at depth %d", depth)
            raise MalformedStreamError("token stream ended before group was closed", pos)
        token = cur.head
        cur = cur.tail
        pos += 1
        if token is CLOSE:
            return Seq.from_iterable(items), cur, pos
        if token is OPEN:
            nested, cur, pos = _parse_group(cur, pos, depth + 1)
            items.append(nested)
        elif isinstance(token, Seq):
            logger.debug("nested Seq found in token stream at depth %d", depth)
            raise MalformedStreamError("nested Seq inside token stream", pos - 1)
        elif is_reserved(token):
            raise MalformedStreamError(f"{token!r} inside token stream", pos - 1)
        else:
            items.append(token)


def restructure(stream: Seq) -> Seq:
    """
    Decode a token stream produced by destructure().

    Raises:
        TypeError: stream is not a Seq.
        MalformedStreamError: stream is empty, does not start with OPEN,
            closes too few groups, has tokens after the root group, or holds a
            nested Seq or EMPTY as a token.
        DepthOverflowError: groups nest deeper than config.max_depth().
    """
    if not isinstance(stream, Seq):
        raise TypeError(f"restructure expects a Seq, got {type(stream).__name__}")
    if stream.is_empty:
        raise MalformedStreamError("empty token stream", 0)
    if stream.head is not OPEN:
        logger.debug("token stream starts with %r", stream.head)
        raise MalformedStreamError("token stream must start with OPEN", 0)

    result, remainder, pos = _parse_group(stream.tail, 1, 0)
    if not remainder.is_empty:
        logger.debug("%d trailing token(s) after root group", len(remainder))
        raise MalformedStreamError("unexpected tokens after the root group closed", pos)
    return result


def is_well_formed(stream: Any) -> bool:
    """
    True if stream is a single balanced OPEN ... CLOSE group of flat tokens.

    Checked with a running bracket count only, so it is safe on streams
    of any depth.
    """
    if not isinstance(stream, Seq) or stream.is_empty or stream.head is not OPEN:
        return False
    balance = 0
    closed = False
    for token in stream:
        if closed or isinstance(token, Seq) or token is EMPTY:
            return False
        if token is OPEN:
            balance += 1
        elif token is CLOSE:
            balance -= 1
            if balance == 0:
                closed = True
    return closed
