"""Polynomials kept as an ordered list of terms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

EMPTY_TEXT = "Polynomial is empty."


@dataclass
class Polynomial:
    """A polynomial as (coefficient, exponent) terms in insertion order."""

    terms: list[tuple[int, int]] = field(default_factory=list)

    def add_term(self, coefficient: int, exponent: int) -> None:
        """Append a term after the existing ones."""
        self.terms.append((coefficient, exponent))

    @classmethod
    def from_coefficients(cls, coefficients: Iterable[int]) -> "Polynomial":
        """Build from coefficients listed from the highest power down to x^0."""
        values = list(coefficients)
        top = len(values) - 1
        return cls([(c, top - i) for i, c in enumerate(values)])

    def __len__(self) -> int:
        return len(self.terms)

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(self.terms)

    def __str__(self) -> str:
        if not self.terms:
            return EMPTY_TEXT
        return " + ".join(_format_term(c, e) for c, e in self.terms)


def _format_term(coefficient: int, exponent: int) -> str:
    if exponent == 0:
        return f"{coefficient}"
    if exponent == 1:
        return f"{coefficient}x"
    return f"{coefficient}x^{exponent}"