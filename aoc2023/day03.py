"""Gear ratios: part numbers and symbols in an engine schematic."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TypeVar

from aoc2023.scanner import AocError, Scanner

_T = TypeVar("_T")


@dataclass(frozen=True)
class PartNumber:
    num: int
    xpos: int
    width: int

    def adjacent_to(self, x: int) -> bool:
        """True if column ``x`` touches this number, diagonals included."""
        return self.xpos - 1 <= x <= self.xpos + self.width


@dataclass(frozen=True)
class Symbol:
    symbol: str
    xpos: int


def parse_schematic_line(line: str) -> tuple[list[Symbol], list[PartNumber]]:
    """Split one schematic row into its symbols and part numbers."""
    scanner = Scanner(line)
    symbols: list[Symbol] = []
    parts: list[PartNumber] = []
    while not scanner.at_end():
        start = scanner.pos
        num = scanner.read_int(signed=False)
        if num is not None:
            parts.append(PartNumber(num, start, scanner.pos - start))
            continue
        char = scanner.peek()
        if char == ".":
            scanner.advance()
            continue
        if char.isalnum():
            raise AocError(f"Encountered unknown character: '{scanner.rest()}'")
        symbols.append(Symbol(char, start))
        scanner.advance()
    return symbols, parts


def parse_schematic(
    lines: Iterable[str],
) -> tuple[list[list[Symbol]], list[list[PartNumber]]]:
    """Parse every row; returns symbols and part numbers row by row."""
    symbols: list[list[Symbol]] = []
    parts: list[list[PartNumber]] = []
    for line in lines:
        row_symbols, row_parts = parse_schematic_line(line)
        symbols.append(row_symbols)
        parts.append(row_parts)
    return symbols, parts


def _near(rows: Sequence[Sequence[_T]], y: int) -> list[_T]:
    """Items of the row ``y`` and the rows directly above and below it."""
    return [item for row in rows[max(y - 1, 0):y + 2] for item in row]


def _check_shape(symbols: Sequence[object], parts: Sequence[object]) -> None:
    if len(symbols) != len(parts):
        raise ValueError("symbols and parts must have the same number of rows")


def sum_part_numbers(
    symbols: Sequence[Sequence[Symbol]], parts: Sequence[Sequence[PartNumber]]
) -> int:
    """Sum of all part numbers adjacent to at least one symbol."""
    _check_shape(symbols, parts)
    total = 0
    for y, row in enumerate(parts):
        nearby = _near(symbols, y)
        total += sum(
            part.num
            for part in row
            if any(part.adjacent_to(sym.xpos) for sym in nearby)
        )
    return total


def sum_gear_ratios(
    symbols: Sequence[Sequence[Symbol]], parts: Sequence[Sequence[PartNumber]]
) -> int:
    """Sum of the products of part pairs around each '*' with exactly two neighbours."""
    _check_shape(symbols, parts)
    total = 0
    for y, row in enumerate(symbols):
        nearby = _near(parts, y)
        for sym in row:
            if sym.symbol != "*":
                continue
            adjacent = [part.num for part in nearby if part.adjacent_to(sym.xpos)]
            if len(adjacent) == 2:
                total += adjacent[0] * adjacent[1]
    return total


def part1(lines: Iterable[str]) -> int:
    return sum_part_numbers(*parse_schematic(lines))


def part2(lines: Iterable[str]) -> int:
    return sum_gear_ratios(*parse_schematic(lines))