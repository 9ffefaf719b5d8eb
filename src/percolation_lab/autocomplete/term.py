"""Weighted search term used by the autocomplete index."""

from dataclasses import dataclass, field
from numbers import Integral
from typing import Callable


@dataclass(frozen=True, order=True)
class Term:
    """A query string with a non-negative weight.

    Terms order and compare by query only; weight is ignored.

    Attributes:
        query: The query string
        weight: Relative importance of the query (e.g., frequency)
    """

    query: str
    weight: int = field(compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.weight, Integral) or isinstance(self.weight, bool):
            raise ValueError(f"Term weight must be an integer, got {self.weight!r}")
        if self.weight < 0:
            raise ValueError(f"Term weight must be non-negative, got {self.weight}")

    @staticmethod
    def by_reverse_weight_order() -> Callable[["Term"], int]:
        """Sort key ordering terms by descending weight."""
        return lambda term: -term.weight

    @staticmethod
    def by_prefix_order(r: int) -> Callable[["Term"], str]:
        """Sort key ordering terms lexicographically by their first r characters.

        Args:
            r: Number of leading characters to compare

        Raises:
            ValueError: If r is negative
        """
        if r < 0:
            raise ValueError(f"Prefix length must be non-negative, got {r}")
        return lambda term: term.query[:r]

    def __str__(self) -> str:
        return f"{self.weight}\t{self.query}"
