"""
Exception types for nestseq.

An empty result from rightmost / deepest_atom is NOT an error; those
operations return the EMPTY sentinel (see nestseq.core.markers).
"""

from __future__ import annotations


class NestSeqError(Exception):
    """Base class for nestseq errors."""
    pass


class MalformedStreamError(NestSeqError, ValueError):
    """Token stream is not a balanced, single-group encoding."""

    def __init__(self, message: str, position: int | None = None) -> None:
        if position is not None:
            message = f"{message} (token {position})"
        super().__init__(message)
        self.position = position


class DepthOverflowError(NestSeqError, RecursionError):
    """Nesting exceeds the configured maximum depth."""

    def __init__(self, depth: int, limit: int) -> None:
        super().__init__(
            f"nesting depth {depth} exceeds limit {limit} "
            f"(raise NESTSEQ_MAX_DEPTH to allow deeper input)"
        )
        self.depth = depth
        self.limit = limit
