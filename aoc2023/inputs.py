"""Reading puzzle input files and environment settings."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable

_ATOI = re.compile(r"\s*([+-]?\d+)")


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Read a file and return its lines without the trailing newline."""
    with open(path, encoding="utf-8", newline="") as handle:
        return [line[:-1] if line.endswith("\n") else line for line in handle]


def split_sections(lines: Iterable[str]) -> list[list[str]]:
    """Split lines into sections separated by empty lines."""
    sections: list[list[str]] = [[]]
    for line in lines:
        if not line:
            sections.append([])
        else:
            sections[-1].append(line)
    return sections


def env_flag(name: str) -> bool:
    """True if the variable is set to anything other than '0' or 'false'."""
    value = os.environ.get(name)
    if value is None:
        return False
    return value not in ("0", "false")


def env_int(name: str) -> int:
    """Leading integer of the variable's value; 0 if unset or not a number."""
    value = os.environ.get(name)
    if value is None:
        return 0
    match = _ATOI.match(value)
    return int(match.group(1)) if match else 0