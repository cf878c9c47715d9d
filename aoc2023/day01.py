"""Trebuchet calibration values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from aoc2023.scanner import AocError

_WORDS = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}


def _first_last(line: str, digits: Iterator[int]) -> int:
    found = list(digits)
    if not found:
        raise AocError(f"Invalid input: {line}")
    return found[0] * 10 + found[-1]


def calibration_value(line: str) -> int:
    """Combine the first and last numeric digits of a line."""
    return _first_last(line, (int(c) for c in line if c in "0123456789"))


def _spelled_digits(line: str) -> Iterator[int]:
    for pos, char in enumerate(line):
        if char in "0123456789":
            yield int(char)
            continue
        for word, value in _WORDS.items():
            if line.startswith(word, pos):
                yield value
                break


def spelled_calibration_value(line: str) -> int:
    """Like calibration_value, but spelled-out digits count too."""
    return _first_last(line, _spelled_digits(line))


def part1(lines: Iterable[str]) -> int:
    return sum(calibration_value(line) for line in lines)


def part2(lines: Iterable[str]) -> int:
    return sum(spelled_calibration_value(line) for line in lines)