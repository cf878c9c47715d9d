"""Haunted wasteland: following left/right instructions through a network."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from itertools import cycle, islice

from aoc2023.scanner import AocError, Scanner

Graph = dict[str, tuple[str, str]]

_NAME_LEN = 3


def _read_name(scanner: Scanner) -> str:
    return scanner.take(_NAME_LEN)


def parse_nodes(lines: Iterable[str]) -> Graph:
    """Read the node lines that follow the instructions and the blank line.

    Nodes keep the order in which their names first appear, whether as a
    node being defined or as one of its neighbours.
    """
    slots: dict[str, tuple[str, str] | None] = {}
    for line in islice(lines, 2, None):
        scanner = Scanner(line)
        name = _read_name(scanner)
        scanner.skip_prefix(" = (")
        left = _read_name(scanner)
        scanner.skip_prefix(", ")
        right = _read_name(scanner)
        scanner.skip_prefix(")")
        if not scanner.at_end():
            raise AocError(f"Unexpected input after node: '{scanner.rest()}'")
        for known in (name, left, right):
            slots.setdefault(known, None)
        slots[name] = (left, right)

    graph: Graph = {}
    for name, links in slots.items():
        if links is None:
            raise AocError(f"Node {name} is referenced but never defined")
        graph[name] = links
    return graph


def _steps(steps: str) -> Iterator[str]:
    if not steps:
        raise ValueError("instructions must not be empty")
    return cycle(steps)


def _follow(graph: Graph, name: str, step: str) -> str:
    left, right = graph[name]
    return left if step == "L" else right


def walk(graph: Graph, steps: str) -> int:
    """Number of steps from AAA to ZZZ."""
    if "AAA" not in graph:
        raise AocError("No node AAA in the network")
    node = "AAA"
    for count, step in enumerate(_steps(steps)):
        if node == "ZZZ":
            return count
        node = _follow(graph, node, step)
    raise AssertionError("unreachable")


def start_nodes(graph: Graph) -> list[str]:
    """Names ending in 'A', in network order."""
    return [name for name in graph if name[_NAME_LEN - 1:_NAME_LEN] == "A"]


def walk_to_end(graph: Graph, steps: str, start: str) -> int:
    """Number of steps from ``start`` to the first node ending in 'Z'."""
    if start not in graph:
        raise AocError(f"No node {start} in the network")
    node = start
    for count, step in enumerate(_steps(steps)):
        if node[_NAME_LEN - 1:_NAME_LEN] == "Z":
            return count
        node = _follow(graph, node, step)
    raise AssertionError("unreachable")


def walk_cycle(graph: Graph, steps: str, start: str) -> int:
    """Steps taken, in whole instruction rounds, until a round starts on a seen node."""
    if start not in graph:
        raise AocError(f"No node {start} in the network")
    if not steps:
        raise ValueError("instructions must not be empty")
    visited: set[str] = set()
    node = start
    count = 0
    while node not in visited:
        visited.add(node)
        for step in steps:
            node = _follow(graph, node, step)
        count += len(steps)
    return count


def part1(lines: Sequence[str]) -> int:
    lines = list(lines)
    if len(lines) < 2:
        raise AocError("Expected instructions followed by an empty line")
    if lines[1]:
        raise AocError(f"Expected an empty second line: '{lines[1]}'")
    return walk(parse_nodes(lines), lines[0])