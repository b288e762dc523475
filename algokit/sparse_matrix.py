"""Sparse matrices stored as (row, column, value) triples."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

MAX_TERMS = 101


@dataclass(frozen=True)
class SparseMatrix:
    """A sparse matrix; its non-zero terms are kept in row-major order."""

    rows: int
    columns: int
    terms: tuple[tuple[int, int, float], ...] = ()

    def __init__(
        self,
        rows: int,
        columns: int,
        terms: Iterable[tuple[int, int, float]] = (),
    ) -> None:
        if rows < 0 or columns < 0:
            raise ValueError("matrix dimensions must be non-negative")
        collected = [(int(r), int(c), float(v)) for r, c, v in terms]
        if len(collected) > MAX_TERMS:
            raise ValueError(f"a sparse matrix holds at most {MAX_TERMS} terms")
        seen: set[tuple[int, int]] = set()
        for row, column, _ in collected:
            if not (0 <= row < rows and 0 <= column < columns):
                raise ValueError(f"term ({row}, {column}) is outside the matrix")
            if (row, column) in seen:
                raise ValueError(f"duplicate term at ({row}, {column})")
            seen.add((row, column))
        object.__setattr__(self, "rows", rows)
        object.__setattr__(self, "columns", columns)
        object.__setattr__(self, "terms", tuple(sorted(collected)))

    def transpose(self) -> SparseMatrix:
        """Return the transpose, swapping every term's row and column."""
        return SparseMatrix(
            self.columns,
            self.rows,
            ((column, row, value) for row, column, value in self.terms),
        )

    def to_dense(self) -> list[list[float]]:
        """Return the full matrix as a list of rows."""
        dense = [[0.0] * self.columns for _ in range(self.rows)]
        for row, column, value in self.terms:
            dense[row][column] = value
        return dense

    def render(self) -> str:
        """Return one line per row, each cell written as ``value,``."""
        return "".join(
            "".join(f"{value:.0f}," for value in row) + "\n"
            for row in self.to_dense()
        )