"""
Pytest configuration for nestseq tests.

Provides:
- Hypothesis configuration for deterministic fuzzing
- Shared hypothesis strategies for nested sequences
- A fixture for lowering the depth limit inside one test
"""

import os
import pytest

from nestseq import config

# =============================================================================
# Hypothesis Configuration
# =============================================================================
# - Database caches found examples for faster reruns (uses .hypothesis/ by default)
# - print_blob=True makes failures easy to reproduce
# NOTE: Do NOT set database=None - that DISABLES the database. Omit to use default.

try:
    from hypothesis import settings

    settings.register_profile(
        "default",
        print_blob=True,
        derandomize=False,
    )

    # CI profile: fixed seed so a red build can be rerun locally
    settings.register_profile(
        "ci",
        print_blob=True,
        derandomize=True,
    )

    profile = os.environ.get("HYPOTHESIS_PROFILE", "default")
    settings.load_profile(profile)

except ImportError:
    pass  # hypothesis not installed, skip configuration


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture
def depth_limit(monkeypatch):
    """Return a setter that lowers config.MAX_DEPTH for the current test."""

    def _set(limit: int) -> None:
        monkeypatch.setattr(config, "MAX_DEPTH", limit)

    return _set
