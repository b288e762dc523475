"""Polynomials stored as terms in ascending exponent order."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Term:
    """One ``coefficient * x^exponent`` term."""

    coefficient: float
    exponent: int

    def __str__(self) -> str:
        sign = "+" if self.coefficient > 0 else ""
        return f"{sign}{self.coefficient:.0f}*x^{self.exponent}"


@dataclass(frozen=True)
class Polynomial:
    """A polynomial whose terms are kept in ascending exponent order."""

    terms: tuple[Term, ...] = ()

    @classmethod
    def from_terms(
        cls, coefficients: Iterable[float], exponents: Iterable[int]
    ) -> Polynomial:
        """Build a polynomial from matching coefficient and exponent sequences."""
        coefficients = list(coefficients)
        exponents = list(exponents)
        if len(coefficients) != len(exponents):
            raise ValueError("coefficients and exponents must have the same length")
        return cls(
            tuple(
                Term(float(coefficient), int(exponent))
                for coefficient, exponent in zip(coefficients, exponents)
            )
        )

    def __add__(self, other: object) -> Polynomial:
        """Merge two polynomials term by term, adding equal exponents."""
        if not isinstance(other, Polynomial):
            return NotImplemented
        merged: list[Term] = []
        mine, theirs = list(self.terms), list(other.terms)
        i = j = 0
        while i < len(mine) and j < len(theirs):
            a, b = mine[i], theirs[j]
            if a.exponent < b.exponent:
                merged.append(a)
                i += 1
            elif a.exponent == b.exponent:
                merged.append(Term(a.coefficient + b.coefficient, a.exponent))
                i += 1
                j += 1
            else:
                merged.append(b)
                j += 1
        merged.extend(mine[i:])
        merged.extend(theirs[j:])
        return Polynomial(tuple(merged))

    def __iter__(self) -> Iterator[Term]:
        return iter(self.terms)

    def __str__(self) -> str:
        return "".join(str(term) for term in self.terms)