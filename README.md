# aoc2023

Solutions to a set of daily programming puzzles, written as a library. Each
day's module takes the puzzle input as a list of strings, one per line, and
returns the answer as an integer.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Days

| Module | Puzzle | Functions |
| --- | --- | --- |
| `aoc2023.day01` | calibration values | `part1`, `part2` |
| `aoc2023.day02` | cube games | `part1`, `part2` |
| `aoc2023.day03` | engine schematic part numbers and gear ratios | `part1`, `part2` |
| `aoc2023.day04` | scratchcards | `part1`, `part2` |
| `aoc2023.day05` | seed-to-location range mappings | `part1`, `part2` |
| `aoc2023.day06` | boat races | `part1` |
| `aoc2023.day08` | left/right network walk from `AAA` to `ZZZ` | `part1` |
| `aoc2023.day09` | sequence extrapolation | `part1`, `part2` |
| `aoc2023.day11` | galaxy distances in an expanding image | `part1`, `part2` |
| `aoc2023.day12` | damaged spring arrangements | `part1`, `part2` |

```python
from aoc2023 import day01
from aoc2023.inputs import read_lines

lines = read_lines("input.txt")
print(day01.part1(lines), day01.part2(lines))
```

The modules also expose their building blocks. Some examples:
`day01.calibration_value`, `day02.parse_game`, `day04.count_cards`,
`day05.min_location_range`, `day08.walk_to_end`, `day09.predict`,
`day11.path_lengths`, `day12.possible_records` and
`day12.possible_records_bruteforce`.

Input that does not have the expected shape raises
`aoc2023.scanner.AocError`.

## Shared helpers

- `aoc2023.scanner.Scanner` is a read cursor over one line. It has methods to
  read integers (`read_int`, `expect_int`, `read_ints`), skip whitespace,
  characters and prefixes (`skip_whitespace`, `skip_until`, `skip_char`,
  `skip_prefix`, `expect`) and take a fixed number of characters (`take`).
  The `expect...` methods raise `AocError` when they cannot read what they
  expect.
- `aoc2023.inputs.read_lines(path)` reads a file into lines without their
  trailing newlines.
- `aoc2023.inputs.split_sections(lines)` splits lines into groups at empty
  lines.
- `aoc2023.inputs.env_flag(name)` is true when an environment variable is set
  to anything except `0` or `false`.
- `aoc2023.inputs.env_int(name)` reads the leading integer of an environment
  variable, or 0.

## What is not included

The package has no command-line program. Read the input yourself and call a
day's functions from Python. Days 7, 10, 13 and 14 have no solution here.
Day 6 and day 8 provide only their first part.