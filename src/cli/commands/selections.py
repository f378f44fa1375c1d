"""Selection commands: view, set and shuffle tweakables."""

import sys
from typing import Optional

import click
from rich.markup import escape

from cli.utils import console, get_lab, parse_value, print_issues, render

LINK_OPTION = click.option("-l", "--link", default="", help="Start from a shared link or fragment")


@click.command()
@LINK_OPTION
@click.option("-d", "--details", is_flag=True, help="Show full concern explanations")
def table(link: str, details: bool):
    """Show every given and tweakable with its current concern."""
    lab = get_lab(link)
    print_issues(lab.issues)
    render(lab, show_details=True if details else None)


@click.command("set")
@click.argument("assignments", nargs=-1, required=True)
@LINK_OPTION
def set_cmd(assignments: tuple[str, ...], link: str):
    """Select values: ID=VALUE ... (values are JSON literals, e.g. false or "object")."""
    lab = get_lab(link)
    print_issues(lab.issues)

    for assignment in assignments:
        if "=" not in assignment:
            console.print(f"[red]Expected ID=VALUE, got:[/] {escape(assignment)}")
            sys.exit(1)
        decision_id, raw = assignment.rsplit("=", 1)
        decision_id, raw = decision_id.strip(), raw.strip()
        if decision_id in lab.catalogue and not lab.editable(decision_id):
            console.print(f"[yellow]Not editable[/] {escape(decision_id)}")
            continue

        value = parse_value(raw)
        before = lab.store.read(decision_id)
        if lab.select(decision_id, value):
            console.print(f"[green]Set[/] {escape(decision_id)} = {escape(raw)}")
        elif decision_id in lab.catalogue and before == value and type(before) is type(value):
            console.print(f"[dim]Unchanged[/] {escape(decision_id)}")
        else:
            console.print(f"[yellow]Rejected[/] {escape(decision_id)} = {escape(raw)}")

    render(lab)
    console.print(f"\n[bold]Link:[/] {lab.save_link()}", soft_wrap=True)


@click.command()
@click.option("--seed", type=int, default=None, help="Seed for reproducible shuffles")
@LINK_OPTION
def shuffle(seed: Optional[int], link: str):
    """Pick a random value for every tweakable."""
    lab = get_lab(link, seed=seed)
    lab.shuffle()
    render(lab)
    console.print(f"\n[bold]Link:[/] {lab.save_link()}", soft_wrap=True)
