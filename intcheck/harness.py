#!/usr/bin/env python3
"""Run check programs in-process and compare them with their declared outcome.

A check program declares what it is expected to do in header comments:

    # OUTCOME=PASS
    # RETVAL=4

``//`` comment markers are accepted as well, so headers copied from the Java
corpus read the same way.
"""

from __future__ import annotations

import argparse
import re
import runpy
from pathlib import Path

OUTCOMES: tuple[str, ...] = ("PASS", "FAIL")

HEADER_RE = re.compile(r"^\s*(?:#|//)\s*(OUTCOME|RETVAL)\s*=(.*)$")

DEFAULT_PROGRAM: Path = Path(__file__).resolve().parent / "__main__.py"


class Result:
    outcome: str
    retval: int

    def __init__(self, outcome: str, retval: int) -> None:
        self.outcome = outcome
        self.retval = retval

    def matches(self, other: Result) -> bool:
        if self.outcome != other.outcome:
            return False
        if self.outcome == "FAIL":
            return True
        return self.retval == other.retval

    def __repr__(self) -> str:
        return f"{self.outcome} (retval {self.retval})"


def read_expectation(path: Path) -> Result:
    outcome: str = "PASS"
    retval: int = 0
    for line in path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped:
            continue
        if not stripped.startswith(("#", "//")):
            break
        match = HEADER_RE.match(stripped)
        if match is None:
            continue
        key, raw = match.groups()
        value = raw.strip()
        if key == "OUTCOME":
            if value not in OUTCOMES:
                raise ValueError(f"{path}: unknown OUTCOME {value!r}")
            outcome = value
        else:
            try:
                retval = int(value)
            except ValueError:
                raise ValueError(f"{path}: RETVAL must be an integer, got {value!r}") from None
    return Result(outcome, retval)


def run_program(path: Path) -> Result:
    """Execute ``path`` as ``__main__`` and classify how it terminated."""
    try:
        runpy.run_path(str(path), run_name="__main__")
    except AssertionError:
        return Result("FAIL", 1)
    except SystemExit as exc:
        code = exc.code
        if code is None:
            return Result("PASS", 0)
        if isinstance(code, int):
            # the OS keeps only the low byte of the status
            return Result("PASS", code & 0xFF)
        return Result("PASS", 1)
    return Result("PASS", 0)


def check_program(path: Path) -> tuple[bool, Result, Result]:
    expected = read_expectation(path)
    actual = run_program(path)
    return expected.matches(actual), expected, actual


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="run integer check programs and compare with their OUTCOME/RETVAL headers",
    )
    parser.add_argument(
        "programs",
        nargs="*",
        type=Path,
        help="program files to check (default: the bundled intcheck program)",
    )
    args = parser.parse_args(argv)

    programs: list[Path] = args.programs or [DEFAULT_PROGRAM]
    failed: int = 0
    for program in programs:
        ok, expected, actual = check_program(program)
        if ok:
            print(f"PASS {program}")
        else:
            failed += 1
            print(f"FAIL {program}: expected {expected!r}, got {actual!r}")
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
