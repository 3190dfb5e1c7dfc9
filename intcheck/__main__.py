# OUTCOME=PASS
# RETVAL=4
"""Integer arithmetic self-check. Exits with the final value of the accumulator."""

from intcheck.arithmetics import run


def main() -> int:
    return run()


if __name__ == "__main__":
    raise SystemExit(main())
