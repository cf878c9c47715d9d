"""Cube conundrum: games of coloured cubes drawn from a bag."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from aoc2023.scanner import AocError, Scanner

_COLORS = ("red", "green", "blue")


@dataclass(frozen=True)
class CubeCount:
    red: int = 0
    green: int = 0
    blue: int = 0

    def power(self) -> int:
        return self.red * self.green * self.blue

    def fits_within(self, other: CubeCount) -> bool:
        return (
            self.red <= other.red
            and self.green <= other.green
            and self.blue <= other.blue
        )


_BAG = CubeCount(red=12, green=13, blue=14)


def _parse_prefix(scanner: Scanner) -> None:
    while not scanner.at_end() and scanner.peek() != ":":
        scanner.advance()
    if scanner.at_end():
        raise AocError(f"Couldn't parse prefix: {scanner.text}")
    scanner.advance()


def _parse_color(scanner: Scanner) -> str:
    for color in _COLORS:
        if scanner.skip_prefix(color):
            return color
    raise AocError(f"Couldn't parse color: {scanner.rest()}")


def _parse_round(scanner: Scanner) -> CubeCount:
    counts = dict.fromkeys(_COLORS, 0)
    while not scanner.at_end():
        scanner.skip_whitespace()
        count = scanner.read_int(signed=False)
        if count is None:
            raise AocError(f'Couldn\'t parse int: "{scanner.rest()}"')
        scanner.skip_whitespace()
        counts[_parse_color(scanner)] += count
        scanner.skip_whitespace()
        round_continues = scanner.skip_char(",")
        round_finished = scanner.skip_char(";")
        if round_finished:
            break
        if not round_continues and not scanner.at_end():
            raise AocError(
                f"Unexpected char (expected ',' or ';'): {scanner.rest()}"
            )
    return CubeCount(**counts)


def parse_game(line: str) -> CubeCount:
    """Return the largest number of cubes of each colour shown in a game."""
    scanner = Scanner(line)
    _parse_prefix(scanner)
    red = green = blue = 0
    while not scanner.at_end():
        drawn = _parse_round(scanner)
        red = max(red, drawn.red)
        green = max(green, drawn.green)
        blue = max(blue, drawn.blue)
    return CubeCount(red, green, blue)


def part1(lines: Iterable[str]) -> int:
    return sum(
        game_id
        for game_id, line in enumerate(lines, start=1)
        if parse_game(line).fits_within(_BAG)
    )


def part2(lines: Iterable[str]) -> int:
    return sum(parse_game(line).power() for line in lines)