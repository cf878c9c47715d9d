import pytest

from aoc2023.day05 import (
    SeedMap,
    SeedRange,
    find_location,
    find_mapping,
    min_location_range,
    parse_maps,
    parse_range,
    parse_seed_ranges,
    parse_seeds,
    part1,
    part2,
)
from aoc2023.inputs import split_sections
from aoc2023.scanner import AocError

EXAMPLE = """seeds: 79 14 55 13

seed-to-soil map:
50 98 2
52 50 48

soil-to-fertilizer map:
0 15 37
37 52 2
39 0 15

fertilizer-to-water map:
49 53 8
0 11 42
42 0 7
57 7 4

water-to-light map:
88 18 7
18 25 70

light-to-temperature map:
45 77 23
81 45 19
68 64 13

temperature-to-humidity map:
0 69 1
1 0 69

humidity-to-location map:
60 56 37
56 93 4""".split("\n")


def test_example_part1():
    assert part1(EXAMPLE) == 35


def test_example_part2():
    assert part2(EXAMPLE) == 46


def test_parse_seeds():
    assert parse_seeds("seeds: 79 14 55 13") == [79, 14, 55, 13]


def test_parse_seed_ranges():
    assert parse_seed_ranges("seeds: 79 14 55 13") == [
        SeedRange(79, 14),
        SeedRange(55, 13),
    ]


def test_parse_seeds_requires_prefix():
    with pytest.raises(AocError):
        parse_seeds("79 14")


def test_parse_range():
    assert parse_range("50 98 2") == SeedMap(50, 98, 2)


def test_parse_range_rejects_trailing_input():
    with pytest.raises(AocError):
        parse_range("50 98 2 7")


def test_parse_maps_skips_headers():
    maps = parse_maps(split_sections(EXAMPLE))
    assert len(maps) == 7
    assert maps[0] == [SeedMap(50, 98, 2), SeedMap(52, 50, 48)]


def test_find_mapping_inside_and_outside():
    mapping = [SeedMap(50, 98, 2)]
    assert find_mapping(98, mapping) == 50
    assert find_mapping(99, mapping) == 51
    assert find_mapping(100, mapping) == 100
    assert find_mapping(10, mapping) == 10


def test_find_mapping_last_match_wins():
    mapping = [SeedMap(100, 0, 10), SeedMap(200, 5, 10)]
    assert find_mapping(3, mapping) == 103
    assert find_mapping(7, mapping) == 202


def test_min_location_range_matches_single_seeds():
    maps = parse_maps(split_sections(EXAMPLE))
    for seed_range in parse_seed_ranges(EXAMPLE[0]):
        expected = min(
            find_location(seed, maps)
            for seed in range(seed_range.start, seed_range.start + seed_range.length)
        )
        assert min_location_range(seed_range, maps) == expected


def test_min_location_range_overlapping_maps():
    maps = [
        [SeedMap(100, 0, 10), SeedMap(200, 5, 10)],
        [SeedMap(0, 104, 3)],
    ]
    seed_range = SeedRange(0, 20)
    expected = min(find_location(seed, maps) for seed in range(20))
    assert min_location_range(seed_range, maps) == expected


def test_min_location_range_empty():
    with pytest.raises(ValueError):
        min_location_range(SeedRange(5, 0), [])