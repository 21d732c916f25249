# AoC - Reference Solution for Day 1 (Part 1 & Part 2)
# Created:      2024-12-01
# Modified:     2024-12-04
# Author:       aoc2024-ref maintainers

import argparse
import logging
import re
import sys
from collections import Counter
from typing import Iterable, Optional, Tuple

from aoc2024.inputs import read_lines

logger = logging.getLogger(__name__)

LINE_PATTERN = re.compile(r"^(\d+)\s+(\d+)$", re.ASCII)


class ParseError(ValueError):
    pass


def to_int(text: str) -> int:
    try:
        return int(text)
    except ValueError as e:
        raise ParseError(f"not an integer: {text!r}") from e


def parse_line(line: str) -> Optional[Tuple[int, int]]:
    line = line.strip()

    # blank lines (trailing newline at the end of the file)
    if not line:
        return None

    m = LINE_PATTERN.match(line)
    if m is None:
        logger.warning("bad line: %s", line)
        return None

    left, right = m.groups()
    return to_int(left), to_int(right)


def parse_lines(lines: Iterable[str]) -> Tuple[list[int], list[int]]:
    left = []
    right = []

    for line in lines:
        pair = parse_line(line)
        if pair is None:
            continue
        left.append(pair[0])
        right.append(pair[1])

    logger.debug("parsed %d pairs", len(left))
    return left, right


# for part 1
def total_distance(left: list[int], right: list[int]) -> int:
    left = sorted(left)
    right = sorted(right)

    # unequal lengths raise ValueError
    return sum(abs(lhs - rhs) for lhs, rhs in zip(left, right, strict=True))


# for part 2
def similarity_score(left: list[int], right: list[int]) -> int:
    counts = Counter(right)
    return sum(x * counts[x] for x in left)


def solve(lines: Iterable[str]) -> int:
    left, right = parse_lines(lines)
    return total_distance(left, right)


def solve_part2(lines: Iterable[str]) -> int:
    left, right = parse_lines(lines)
    return similarity_score(left, right)


def main(argv=None):
    parser = argparse.ArgumentParser(prog="aoc-day01")
    parser.add_argument("input_file")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    lines = read_lines(args.input_file)

    print(solve(lines))
    print(solve_part2(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())
