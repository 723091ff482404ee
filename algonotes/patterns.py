"""Star patterns rendered as lists of text lines, with a small command line."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence


def pyramid(n: int) -> list[str]:
    """Return a pyramid of ``n`` rows, row ``i`` holding ``i + 1`` stars."""
    return [" " * (n - i) + "* " * (i + 1) for i in range(n)]


def inverted_pyramid(n: int) -> list[str]:
    """Return a pyramid of ``n`` rows standing on its point."""
    return [" " * (n - row + 1) + "* " * row for row in range(n, 0, -1)]


def _hollow_row(width: int) -> str:
    return "".join("* " if col in (0, width - 1) else "  " for col in range(width))


def hollow_pyramid(n: int) -> list[str]:
    """Return the outline of a pyramid of ``n`` rows."""
    return [" " * (n - i) + _hollow_row(i + 1) for i in range(n)]


def hollow_inverted_pyramid(n: int) -> list[str]:
    """Return the outline of an inverted pyramid of ``n`` rows."""
    return [" " * (n - row + 1) + _hollow_row(row) for row in range(n, 0, -1)]


def hollow_diamond(n: int) -> list[str]:
    """Return a hollow pyramid followed by its inverted twin."""
    return hollow_pyramid(n) + hollow_inverted_pyramid(n)


def star_frame(n: int) -> list[str]:
    """Return a block of stars with a diamond-shaped gap cut out of it."""
    half = n // 2
    upper = ["*" * (half - i + 1) + " " * (2 * i + 1) + "*" * (half - i) for i in range(half)]
    lower = ["*" * (i + 1) + " " * (2 * (half - i) - 1) + "*" * (i + 1) for i in range(half)]
    return upper + lower


def hollow_triangle(n: int) -> list[str]:
    """Return a right triangle outline with a full top edge of ``n`` stars."""
    lines = []
    for i in range(n):
        if i == 0:
            lines.append("*" * n)
        else:
            lines.append("".join("*" if j in (0, n - 1 - i) else " " for j in range(n)))
    return lines


PATTERNS: dict[str, Callable[[int], list[str]]] = {
    "pyramid": pyramid,
    "inverted-pyramid": inverted_pyramid,
    "hollow-pyramid": hollow_pyramid,
    "hollow-inverted-pyramid": hollow_inverted_pyramid,
    "hollow-diamond": hollow_diamond,
    "star-frame": star_frame,
    "hollow-triangle": hollow_triangle,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Print the chosen pattern for the given size."""
    parser = argparse.ArgumentParser(description="Print a star pattern.")
    parser.add_argument("pattern", choices=sorted(PATTERNS))
    parser.add_argument("size", type=int)
    args = parser.parse_args(argv)
    for line in PATTERNS[args.pattern](args.size):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())