"""
Reference implementations used to pin down the fast ones.

naive_destructure follows the definition of the encoding one case at a
time and joins partial results by list concatenation, which is quadratic.
destructure() must emit exactly the same tokens.
"""

from nestseq import Seq, OPEN, CLOSE


def naive_destructure(s):
    if s.is_empty:
        return [OPEN, CLOSE]
    head, tail = s.head, s.tail
    if isinstance(head, Seq):
        return [OPEN] + naive_destructure(head) + naive_destructure(tail)[1:]
    return [OPEN, head] + naive_destructure(tail)[1:]
