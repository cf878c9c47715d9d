"""Seed fertilizer: following seeds through a chain of range mappings."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from aoc2023.inputs import split_sections
from aoc2023.scanner import AocError, Scanner


@dataclass(frozen=True)
class SeedMap:
    dest_start: int
    src_start: int
    length: int

    @property
    def src_end(self) -> int:
        return self.src_start + self.length

    def covers(self, pos: int) -> bool:
        return self.src_start <= pos < self.src_end


@dataclass(frozen=True)
class SeedRange:
    start: int
    length: int


def _seed_numbers(line: str) -> list[int]:
    scanner = Scanner(line)
    scanner.expect("seeds:")
    scanner.skip_whitespace()
    seeds = []
    while not scanner.at_end():
        scanner.skip_whitespace()
        seeds.append(scanner.expect_int(signed=False))
    return seeds


def parse_seeds(line: str) -> list[int]:
    return _seed_numbers(line)


def parse_seed_ranges(line: str) -> list[SeedRange]:
    """Read the seed line as pairs of start and length."""
    numbers = _seed_numbers(line)
    if len(numbers) % 2:
        raise AocError(f"Seed ranges need a length: '{line}'")
    return [SeedRange(start, length) for start, length in zip(numbers[::2], numbers[1::2])]


def parse_range(line: str) -> SeedMap:
    scanner = Scanner(line)
    dest = scanner.expect_int(signed=False)
    scanner.skip_whitespace()
    src = scanner.expect_int(signed=False)
    scanner.skip_whitespace()
    length = scanner.expect_int(signed=False)
    if not scanner.at_end():
        raise AocError(f"Unexpected input after mapping: '{scanner.rest()}'")
    return SeedMap(dest, src, length)


def parse_maps(sections: Sequence[Sequence[str]]) -> list[list[SeedMap]]:
    """Parse every section after the seeds; each starts with a header line."""
    return [[parse_range(line) for line in section[1:]] for section in sections[1:]]


def find_mapping(pos: int, mapping: Sequence[SeedMap]) -> int:
    """Map a position; when several ranges cover it, the last one wins."""
    dest = pos
    for entry in mapping:
        if entry.covers(pos):
            dest = pos - entry.src_start + entry.dest_start
    return dest


def find_location(pos: int, maps: Iterable[Sequence[SeedMap]]) -> int:
    for mapping in maps:
        pos = find_mapping(pos, mapping)
    return pos


def _map_intervals(
    intervals: list[tuple[int, int]], mapping: Sequence[SeedMap]
) -> list[tuple[int, int]]:
    """Map half-open intervals with the same last-wins rule as find_mapping."""
    pending = intervals
    mapped: list[tuple[int, int]] = []
    for entry in reversed(mapping):
        lo, hi = entry.src_start, entry.src_end
        shift = entry.dest_start - entry.src_start
        remaining = []
        for start, end in pending:
            if hi <= start or end <= lo:
                remaining.append((start, end))
                continue
            if start < lo:
                remaining.append((start, lo))
            if hi < end:
                remaining.append((hi, end))
            overlap_start, overlap_end = max(start, lo), min(end, hi)
            if overlap_start < overlap_end:
                mapped.append((overlap_start + shift, overlap_end + shift))
        pending = remaining
    return mapped + pending


def min_location_range(
    seed_range: SeedRange, maps: Iterable[Sequence[SeedMap]]
) -> int:
    """Lowest location reached by any seed in the range."""
    if seed_range.length <= 0:
        raise ValueError("seed range is empty")
    intervals = [(seed_range.start, seed_range.start + seed_range.length)]
    for mapping in maps:
        intervals = _map_intervals(intervals, mapping)
    return min(start for start, _ in intervals)


def _parse(lines: Iterable[str]) -> tuple[str, list[list[SeedMap]]]:
    sections = split_sections(lines)
    header = sections[0]
    if len(header) != 1:
        raise AocError("Expected a single line of seeds")
    return header[0], parse_maps(sections)


def part1(lines: Iterable[str]) -> int:
    header, maps = _parse(lines)
    seeds = parse_seeds(header)
    if not seeds:
        raise AocError("No seeds in input")
    return min(find_location(seed, maps) for seed in seeds)


def part2(lines: Iterable[str]) -> int:
    header, maps = _parse(lines)
    ranges = [r for r in parse_seed_ranges(header) if r.length > 0]
    if not ranges:
        raise AocError("No seed ranges in input")
    return min(min_location_range(r, maps) for r in ranges)