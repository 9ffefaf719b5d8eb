"""Autocomplete command for prefix queries over weighted terms."""

import click
from rich.console import Console
from rich.table import Table

from percolation_lab.autocomplete import Autocomplete, Term
from percolation_lab.error.cmd import handle_command_errors

console = Console()


def parse_term(value: str) -> Term:
    """Parse a QUERY=WEIGHT string into a Term.

    The weight is taken after the last '=', so queries may contain '='.

    Raises:
        ValueError: If the value has no '=' or the weight is not an integer
    """
    query, sep, weight = value.rpartition("=")
    if not sep:
        raise ValueError(f"Invalid term {value!r}: expected QUERY=WEIGHT")
    try:
        return Term(query, int(weight))
    except ValueError as e:
        raise ValueError(f"Invalid term {value!r}: {e}") from e


@click.command()
@click.argument("prefix")
@click.option(
    "--term",
    "-t",
    "terms",
    multiple=True,
    required=True,
    help="Term to index as QUERY=WEIGHT (repeatable)",
)
@click.option("--limit", "-k", type=click.IntRange(min=1), help="Show only the top K matches")
@handle_command_errors
def complete(prefix: str, terms: tuple[str, ...], limit: int | None):
    """Show terms starting with PREFIX, heaviest first."""
    autocomplete = Autocomplete(parse_term(value) for value in terms)
    matches = autocomplete.all_matches(prefix)
    if limit is not None:
        matches = matches[:limit]

    table = Table(title=f"Matches for '{prefix}'")
    table.add_column("Weight", style="cyan", justify="right")
    table.add_column("Query", style="green")
    for term in matches:
        table.add_row(str(term.weight), term.query)

    console.print(table)
    console.print(f"[dim]Total matches: {autocomplete.number_of_matches(prefix)}[/dim]")
