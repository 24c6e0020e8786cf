#!/usr/bin/env python3
"""Run the photogallery test suite and a layout smoke run.

Qt tests need the optional ``qt`` extra; they are left out when PySide6 is
not installed.
"""
from __future__ import annotations

import importlib.util
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
QT_TESTS = {"test_qt_width.py"}


def run(cmd: list[str]) -> int:
    print("$", " ".join(cmd))
    return subprocess.run(cmd, check=False, cwd=ROOT).returncode


def test_modules(with_qt: bool) -> list[str]:
    modules = []
    for path in sorted((ROOT / "tests").glob("test_*.py")):
        if path.name in QT_TESTS and not with_qt:
            continue
        modules.append(path.relative_to(ROOT).as_posix())
    return modules


def main() -> int:
    with_qt = importlib.util.find_spec("PySide6") is not None
    if not with_qt:
        print("PySide6 not installed: skipping", ", ".join(sorted(QT_TESTS)))

    steps = [
        [sys.executable, "-m", "unittest", *test_modules(with_qt)],
        [sys.executable, "scripts/demo_layout.py"],
    ]
    for cmd in steps:
        code = run(cmd)
        if code != 0:
            print("\n❌ dev_check failed")
            return code

    print("\n✅ dev_check passed")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
