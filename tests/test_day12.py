import pytest

from aoc2023.day12 import (
    Record,
    is_possible,
    parse_record,
    parse_record_unfolded,
    part1,
    part2,
    possible_records,
    possible_records_bruteforce,
)
from aoc2023.scanner import AocError

EXAMPLE = [
    "???.### 1,1,3",
    ".??..??...?##. 1,1,3",
    "?#?#?#?#?#?#?#? 1,3,1,6",
    "????.#...#... 4,1,1",
    "????.######..#####. 1,6,5",
    "?###???????? 3,2,1",
]


def test_parse_record():
    record = parse_record("???.### 1,1,3")
    assert record == Record("???.###", (1, 1, 3))


def test_parse_record_unfolded():
    record = parse_record_unfolded(".# 1")
    assert record.conditions == ".#?.#?.#?.#?.#"
    assert record.groups == (1, 1, 1, 1, 1)


def test_parse_record_without_groups_fails():
    with pytest.raises(AocError):
        parse_record("???.###")


def test_parse_record_bad_group_fails():
    with pytest.raises(AocError):
        parse_record("??? a,b")


@pytest.mark.parametrize("line", EXAMPLE)
def test_dp_matches_bruteforce(line):
    record = parse_record(line)
    assert possible_records(record) == possible_records_bruteforce(record)


@pytest.mark.parametrize(
    "line", ["#?.?#? 1,2", "?????? 1,1", "#.#.# 1,1,1", "??#?? 5", ".... 1"]
)
def test_dp_matches_bruteforce_more(line):
    record = parse_record(line)
    assert possible_records(record) == possible_records_bruteforce(record)


def test_known_configuration_has_one_arrangement():
    record = parse_record("#.#.### 1,1,3")
    assert possible_records(record) == 1
    assert is_possible(record.groups, record.conditions)


def test_is_possible():
    assert is_possible([1, 1, 3], "#.#.###")
    assert is_possible([1, 1, 3], "..#...#...###.")
    assert not is_possible([1, 1, 3], "##..###")
    assert not is_possible([1, 1, 3], "#.#.###.#")
    assert not is_possible([1], "?")


def test_example_part1():
    assert part1(EXAMPLE) == 21


def test_example_part2():
    assert part2(EXAMPLE) == 525152


def test_unfolding_never_reduces_count():
    for line in EXAMPLE:
        assert possible_records(parse_record_unfolded(line)) >= possible_records(
            parse_record(line)
        )


def test_empty_input_fails():
    with pytest.raises(AocError):
        part1([])