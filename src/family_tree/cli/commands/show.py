from __future__ import annotations

import typer
from rich.console import Console

from family_tree.cli.utils import load_example
from family_tree.printer import format_tree
from family_tree.teardown import destroy_tree

console = Console(stderr=True)


def show_command(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Print the example family tree.
    """
    root = load_example(verbose=verbose)

    typer.echo(format_tree(root), nl=False)

    released = destroy_tree(root)

    if verbose:
        console.log(f"Released {released} person(s)")
