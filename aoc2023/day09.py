"""Mirage maintenance: extrapolating sequences by repeated differences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from aoc2023.scanner import AocError, Scanner


def parse_sequences(lines: Iterable[str]) -> list[list[int]]:
    sequences = []
    for line in lines:
        scanner = Scanner(line)
        values = scanner.read_ints()
        if not scanner.at_end():
            raise AocError(f"Unexpected input: '{scanner.rest()}'")
        sequences.append(values)
    return sequences


def _differences(seq: Sequence[int]) -> list[int]:
    return [b - a for a, b in zip(seq, seq[1:])]


def predict(seq: Sequence[int]) -> int:
    """Extrapolate the next value of a sequence."""
    if all(value == 0 for value in seq):
        return 0
    return seq[-1] + predict(_differences(seq))


def predict_prev(seq: Sequence[int]) -> int:
    """Extrapolate the value preceding a sequence."""
    if all(value == 0 for value in seq):
        return 0
    return seq[0] - predict_prev(_differences(seq))


def _total(values: list[int]) -> int:
    if not values:
        raise AocError("No sequences in input")
    return sum(values)


def part1(lines: Iterable[str]) -> int:
    return _total([predict(seq) for seq in parse_sequences(lines)])


def part2(lines: Iterable[str]) -> int:
    return _total([predict_prev(seq) for seq in parse_sequences(lines)])