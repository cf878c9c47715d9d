"""Boat races: ways to beat the record distance."""

from __future__ import annotations

import math
from collections.abc import Sequence

from aoc2023.scanner import AocError, Scanner


def parse_line(line: str) -> list[int]:
    """Read the integers following the label of a line."""
    scanner = Scanner(line)
    scanner.skip_until(":")
    return scanner.read_ints()


def count_ways_to_beat_record(time: int, dist: int) -> int:
    return sum(1 for hold in range(1, time) if (time - hold) * hold > dist)


def part1(lines: Sequence[str]) -> int:
    if len(lines) != 2:
        raise AocError(f"Expected 2 lines, got {len(lines)}")
    times = parse_line(lines[0])
    dists = parse_line(lines[1])
    if len(times) != len(dists):
        raise AocError("Number of times and distances differ")
    if not times:
        raise AocError("No races found")
    return math.prod(
        count_ways_to_beat_record(time, dist) for time, dist in zip(times, dists)
    )