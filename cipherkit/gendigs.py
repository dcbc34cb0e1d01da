"""Write every fixed-width decimal number, one per line, to a file."""

from __future__ import annotations

import argparse
import itertools
import sys
from collections.abc import Iterator
from pathlib import Path

_BUFFER_SIZE = 1000 * 1000


def iter_digit_lines(digits: int) -> Iterator[str]:
    """Yield "00..0\\n" through "99..9\\n" with ``digits`` digits each."""
    if digits < 0:
        raise ValueError(f"invalid number of digits {digits}")
    for combo in itertools.product("0123456789", repeat=digits):
        yield "".join(combo) + "\n"


def generate(digits: int, filename: str | Path | None = None) -> Path:
    """Write all numbers of ``digits`` digits to a file and return its path."""
    path = Path(filename) if filename else Path(f"digits-{digits:02d}.txt")
    lines = iter_digit_lines(digits)
    with path.open("w", encoding="ascii", newline="", buffering=_BUFFER_SIZE) as f:
        f.writelines(lines)
    return path


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Write every number with the given count of digits to a file."
    )
    parser.add_argument("-digs", "--digs", type=int, default=3, help="number of digits")
    parser.add_argument("-filename", "--filename", default="", help="result file name")
    args = parser.parse_args(argv)
    try:
        generate(args.digs, args.filename or None)
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())