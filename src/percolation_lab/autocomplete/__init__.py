"""Prefix autocomplete over weighted terms.

Independent of the union-find and percolation modules.
"""

from percolation_lab.autocomplete.autocomplete import Autocomplete
from percolation_lab.autocomplete.term import Term

__all__ = ["Autocomplete", "Term"]
