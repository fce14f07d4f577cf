#!/usr/bin/env python3
"""Run the LOW -> ORCH import check outside pytest (pre-commit / CI shell step)."""

from __future__ import annotations

import sys
from pathlib import Path

TEST_FN = "test_core_never_imports_cli"


def main() -> int:
    repo_root = Path(__file__).resolve().parents[1]
    test_path = repo_root / "tests" / "test_arch_boundaries.py"
    if not test_path.is_file():
        print(f"[bubblebabble] ERROR: {test_path} not found.", file=sys.stderr)
        return 3

    # the test locates src/ relative to its own __file__
    ns: dict[str, object] = {"__file__": str(test_path)}
    try:
        code = test_path.read_text(encoding="utf-8")
        exec(compile(code, str(test_path), "exec"), ns, ns)
        fn = ns.get(TEST_FN)
        if not callable(fn):
            print(f"[bubblebabble] ERROR: {TEST_FN} not found.", file=sys.stderr)
            return 3
        fn()  # type: ignore[misc]
        print("OK: core modules never import the CLI.")
        return 0
    except AssertionError as e:
        print(str(e), file=sys.stderr)
        return 2
    except Exception as e:
        print(f"[bubblebabble] ERROR: unexpected failure: {e}", file=sys.stderr)
        return 3


if __name__ == "__main__":
    raise SystemExit(main())
