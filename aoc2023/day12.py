"""Hot springs: counting arrangements of damaged springs."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from functools import cache
from itertools import product

from aoc2023.scanner import AocError, Scanner

_UNFOLD = 5


@dataclass(frozen=True)
class Record:
    conditions: str
    groups: tuple[int, ...]


def _split_record(line: str) -> tuple[str, tuple[int, ...]]:
    conditions, space, rest = line.partition(" ")
    if not space or not conditions:
        raise AocError(f"Expected conditions followed by groups: '{line}'")
    scanner = Scanner(rest)
    groups = []
    while not scanner.at_end():
        groups.append(scanner.expect_int())
        scanner.skip_char(",")
    return conditions, tuple(groups)


def parse_record(line: str) -> Record:
    conditions, groups = _split_record(line)
    return Record(conditions, groups)


def parse_record_unfolded(line: str) -> Record:
    """Parse a record with its conditions and groups repeated five times."""
    conditions, groups = _split_record(line)
    return Record("?".join([conditions] * _UNFOLD), groups * _UNFOLD)


def possible_records(record: Record) -> int:
    """Number of ways the unknown springs can be filled in to match the groups."""
    conditions = record.conditions
    groups = record.groups
    size = len(conditions)

    @cache
    def count(pos: int, group: int) -> int:
        if pos >= size:
            return 1 if group == len(groups) else 0
        char = conditions[pos]
        total = 0
        if char in ".?":
            total += count(pos + 1, group)
        if char in "#?" and group < len(groups):
            end = pos + groups[group]
            fits = (
                end <= size
                and "." not in conditions[pos:end]
                and (end == size or conditions[end] != "#")
            )
            if fits:
                total += count(end + 1, group + 1)
        return total

    result = count(0, 0)
    count.cache_clear()
    return result


def is_possible(groups: Sequence[int], config: str) -> bool:
    """True if a fully known configuration shows exactly these groups."""
    pattern = "".join(rf"\.*#{{{n}}}(?!#)" for n in groups) + r"\.*"
    return re.fullmatch(pattern, config) is not None


def _all_configs(conditions: str) -> Iterable[str]:
    unknown = conditions.count("?")
    template = conditions.replace("%", "%%").replace("?", "%s")
    for choice in product(".#", repeat=unknown):
        yield template % choice


def possible_records_bruteforce(record: Record) -> int:
    """Count arrangements by trying every way to fill in the unknowns."""
    return sum(
        1 for config in _all_configs(record.conditions)
        if is_possible(record.groups, config)
    )


def _total(records: list[Record]) -> int:
    if not records:
        raise AocError("No records in input")
    return sum(possible_records(record) for record in records)


def part1(lines: Iterable[str]) -> int:
    return _total([parse_record(line) for line in lines])


def part2(lines: Iterable[str]) -> int:
    return _total([parse_record_unfolded(line) for line in lines])