#!/usr/bin/env python3
"""
Unified nestseq test runner.

Right now this is intentionally boring: it just runs pytest -vv
so that the *single source of truth* for test status is pytest.
Pass --stress to include tests/stress/.
"""

import subprocess
import sys


def main() -> int:
    args = [sys.executable, "-m", "pytest", "-vv"]
    if "--stress" not in sys.argv[1:]:
        args += ["--ignore=tests/stress"]
    print("=== nestseq: running pytest suite ===")
    result = subprocess.run(args, check=False)
    return result.returncode


if __name__ == "__main__":
    raise SystemExit(main())
