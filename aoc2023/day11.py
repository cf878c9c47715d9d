"""Cosmic expansion: distances between galaxies in an expanding image."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import combinations

from aoc2023.scanner import AocError

Image = list[list[bool]]

PART1_FACTOR = 1
PART2_FACTOR = 1_000_000


def parse_image(lines: Iterable[str]) -> Image:
    """Read an image; True marks a galaxy, anything but '.' is one."""
    return [[char != "." for char in line] for line in lines]


def row_expansion(image: Image, factor: int) -> list[int]:
    """Width of each row: 1 if it holds a galaxy, otherwise ``factor``."""
    return [1 if any(row) else factor for row in image]


def column_expansion(image: Image, factor: int) -> list[int]:
    """Width of each column: 1 if it holds a galaxy, otherwise ``factor``."""
    width = len(image[0]) if image else 0
    return [
        1 if any(row[x] for row in image) else factor for x in range(width)
    ]


def find_galaxies(image: Image) -> list[tuple[int, int]]:
    """Positions (x, y) of all galaxies in row-major order."""
    return [
        (x, y)
        for y, row in enumerate(image)
        for x, galaxy in enumerate(row)
        if galaxy
    ]


def _span(expansion: Sequence[int], a: int, b: int) -> int:
    start = min(a, b)
    return sum(expansion[start:start + abs(a - b)])


def path_lengths(
    image: Image, exp_row: Sequence[int], exp_col: Sequence[int]
) -> list[int]:
    """Distance between every pair of galaxies, in pair order."""
    return [
        _span(exp_col, x1, x2) + _span(exp_row, y1, y2)
        for (x1, y1), (x2, y2) in combinations(find_galaxies(image), 2)
    ]


def _solve(lines: Iterable[str], factor: int) -> int:
    image = parse_image(lines)
    dists = path_lengths(
        image, row_expansion(image, factor), column_expansion(image, factor)
    )
    if not dists:
        raise AocError("Fewer than two galaxies in the image")
    return sum(dists)


def part1(lines: Iterable[str]) -> int:
    return _solve(lines, PART1_FACTOR)


def part2(lines: Iterable[str]) -> int:
    return _solve(lines, PART2_FACTOR)