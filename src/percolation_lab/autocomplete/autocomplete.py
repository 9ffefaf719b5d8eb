"""Prefix autocomplete over a fixed collection of weighted terms."""

from typing import Iterable

from percolation_lab.autocomplete.term import Term


class Autocomplete:
    """Answers prefix queries against a fixed set of terms."""

    def __init__(self, terms: Iterable[Term]) -> None:
        self.terms: tuple[Term, ...] = tuple(terms)

    def all_matches(self, prefix: str) -> list[Term]:
        """Get all terms starting with prefix.

        Args:
            prefix: Query prefix; the empty string matches every term.

        Returns:
            Matching terms in descending order of weight. Terms with equal
            weight keep their original order.
        """
        matches = [term for term in self.terms if term.query.startswith(prefix)]
        matches.sort(key=Term.by_reverse_weight_order())
        return matches

    def number_of_matches(self, prefix: str) -> int:
        """Get number of terms starting with prefix."""
        return sum(1 for term in self.terms if term.query.startswith(prefix))
