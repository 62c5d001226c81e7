from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from family_tree.cli.utils import load_example, tree_summary
from family_tree.teardown import destroy_tree

console = Console()


def stats_command(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show summary statistics for the example family tree.
    """
    root = load_example(verbose=verbose)
    summary = tree_summary(root)
    destroy_tree(root)

    table = Table(title="Family Tree Statistics")
    table.add_column("Metric", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Persons", str(summary["persons"]))
    table.add_row("Generations", str(summary["generations"]))
    table.add_row("Leaves", str(summary["leaves"]))
    for gender, count in summary["genders"].items():
        table.add_row(f"Gender {gender}", str(count))

    console.print(table)
