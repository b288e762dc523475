"""Towers of Hanoi move generation."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Move:
    """Move ``disk`` from peg ``source`` to peg ``target``."""

    disk: int
    source: str
    target: str

    def __str__(self) -> str:
        return f"Move disk {self.disk} from peg {self.source} to peg {self.target}"


def hanoi_moves(
    n: int, start: str = "B", temp: str = "C", end: str = "A"
) -> Iterator[Move]:
    """Yield the moves that carry ``n`` disks from ``start`` to ``end``."""
    if n <= 0:
        return
    yield from hanoi_moves(n - 1, start, end, temp)
    yield Move(n, start, end)
    yield from hanoi_moves(n - 1, temp, start, end)


def describe_moves(
    n: int, start: str = "B", temp: str = "C", end: str = "A"
) -> list[str]:
    """Return the moves for ``n`` disks as lines of text."""
    return [str(move) for move in hanoi_moves(n, start, temp, end)]