"""Scratchcards."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from aoc2023.scanner import AocError, Scanner


@dataclass(frozen=True)
class Card:
    id: int
    numbers: tuple[int, ...]
    winning: frozenset[int]

    def matches(self) -> int:
        return sum(1 for number in self.numbers if number in self.winning)


def parse_card(line: str) -> Card:
    scanner = Scanner(line)
    scanner.expect("Card")
    scanner.skip_whitespace()
    card_id = scanner.expect_int(signed=False)
    scanner.expect(":")
    scanner.skip_whitespace()

    winning = []
    while scanner.peek() != "|":
        winning.append(scanner.expect_int(signed=False))
        scanner.skip_whitespace()
    scanner.expect("|")
    scanner.skip_whitespace()

    numbers = []
    while not scanner.at_end():
        numbers.append(scanner.expect_int(signed=False))
        scanner.skip_whitespace()

    return Card(card_id, tuple(numbers), frozenset(winning))


def count_points(card: Card) -> int:
    points = 0
    for number in card.numbers:
        if number in card.winning:
            points = max(2 * points, 1)
    return points


def count_cards(cards: Sequence[Card]) -> int:
    """Total number of cards once winning cards hand out copies."""
    copies = [1] * len(cards)
    for card in cards:
        index = card.id - 1
        for offset in range(1, card.matches() + 1):
            if index + offset >= len(copies):
                raise AocError(f"Card {card.id} wins copies past the last card")
            copies[index + offset] += copies[index]
    return sum(copies)


def part1(lines: Iterable[str]) -> int:
    return sum(count_points(parse_card(line)) for line in lines)


def part2(lines: Iterable[str]) -> int:
    return count_cards([parse_card(line) for line in lines])