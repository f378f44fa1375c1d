"""Discovery report CLI command."""

import sys

import click
from rich.markup import escape

from cli.utils import console, print_report


@click.command()
@click.argument("decision_ids", nargs=-1)
@click.option("-d", "--details", is_flag=True, help="Show full concern explanations")
def report(decision_ids: tuple[str, ...], details: bool):
    """List every concern each tweakable can raise under some selection."""
    from lab import default_catalogue
    from lab.discovery import build_report, discover

    catalogue = default_catalogue()

    if decision_ids:
        unknown = [d for d in decision_ids if d not in catalogue]
        if unknown:
            console.print(f"[red]Unknown decision:[/] {escape(', '.join(unknown))}")
            sys.exit(1)
        results = {d: discover(catalogue.get(d)) for d in decision_ids}
    else:
        with console.status("Exploring decisions..."):
            results = build_report(catalogue)

    print_report(results, details=details)
