"""
Runtime configuration for nestseq.

Values come from the environment at import time:

    NESTSEQ_MAX_DEPTH   maximum nesting depth accepted by every operation
                        (default 200)
    NESTSEQ_DEBUG       set to "1" to log DEBUG records to stderr
"""

from __future__ import annotations

import logging
import os

from nestseq.errors import DepthOverflowError

# Kept well below Python's default recursion limit (~1000): nested
# sequences are walked with one stack frame per level, plus the frames
# used by __eq__ / __repr__ on the way down.
DEFAULT_MAX_DEPTH = 200


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e
    if value < 1:
        raise ValueError(f"{name} must be >= 1, got {value}")
    return value


MAX_DEPTH = _int_from_env("NESTSEQ_MAX_DEPTH", DEFAULT_MAX_DEPTH)

# Feature flag: set NESTSEQ_DEBUG=1 to see debug records on stderr
NESTSEQ_DEBUG_ENABLED = os.environ.get("NESTSEQ_DEBUG", "0") == "1"

logger = logging.getLogger("nestseq")
logger.addHandler(logging.NullHandler())

if NESTSEQ_DEBUG_ENABLED:
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter("%(name)s %(levelname)s: %(message)s"))
    logger.addHandler(_handler)
    logger.setLevel(logging.DEBUG)


def max_depth() -> int:
    """Return the live depth limit (read on every call so tests can patch it)."""
    return MAX_DEPTH


def check_depth(depth: int) -> None:
    """Raise DepthOverflowError if depth is past the configured limit."""
    limit = max_depth()
    if depth > limit:
        logger.debug("depth %d exceeds limit %d", depth, limit)
        raise DepthOverflowError(depth, limit)
