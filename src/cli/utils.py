"""Shared CLI utilities: session construction and rich rendering."""

import json
import random
from typing import Any, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from lab import Laboratory
from lab.evaluator import Row

console = Console()


def link_fragment(link: str) -> str:
    """Extract the fragment from a shared URL, or return a bare fragment as is.

    Fragments keep ``#`` unescaped (ids such as ``typeof #[]``), so only a
    ``#`` that comes before the JSON object separates a URL from its fragment.
    """
    starts = [i for i in (link.find("{"), link.upper().find("%7B")) if i >= 0]
    body_start = min(starts) if starts else len(link)
    hash_at = link.rfind("#", 0, body_start)
    return link[hash_at + 1:] if hash_at >= 0 else link


def get_lab(link: str = "", seed: Optional[int] = None, render_fn=None) -> Laboratory:
    """Build a laboratory session from the active config and an optional link.

    ``link`` may be a bare fragment or a full URL containing one.
    """
    config = click.get_current_context().obj["config"]
    if seed is None:
        seed = config.shuffle.seed
    return Laboratory(
        fragment=link_fragment(link),
        base_url=config.share.base_url,
        rng=random.Random(seed),
        render=render_fn,
    )


def parse_value(raw: str) -> Any:
    """Parse a JSON literal (true, "object"), falling back to the bare string."""
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def format_value(value: Any) -> str:
    return json.dumps(value)


def print_issues(issues: list[str]) -> None:
    for issue in issues:
        console.print(f"[yellow]•[/] {escape(issue)}")
    if issues:
        console.print()


def build_table(rows: list[Row], show_details: bool = False, concern_width: int = 60) -> Table:
    table = Table(show_header=True, title="Record and Tuple Laboratory")
    table.add_column("Input", style="cyan", no_wrap=True)
    table.add_column("Output")
    table.add_column("Concern", width=concern_width)

    for row in rows:
        decision = row.decision
        name = escape(decision.id)
        if decision.is_fact:
            output = format_value(row.value)
        else:
            choices = [
                f"[bold green]{format_value(v)}[/]" if v == row.value and type(v) is type(row.value)
                else f"[dim]{format_value(v)}[/]"
                for v in decision.domain
            ]
            output = " | ".join(choices)

        if row.unavailable:
            table.add_row(f"[dim]{name}[/]", output, f"[dim]… {escape(row.unavailable)}[/]")
        elif row.concern:
            text = f"[red]⚠ {escape(row.concern.title)}[/]"
            if show_details:
                text += f"\n{escape(row.concern.body)}"
                for label, url in row.concern.links:
                    text += f"\n[blue]{escape(label)}: {url}[/]"
            table.add_row(name, output, text)
        else:
            table.add_row(name, output, "")

    return table


def print_report(results: dict, details: bool = False) -> None:
    """Print discovery outcomes grouped by decision id."""
    for decision_id, outcomes in results.items():
        console.print(f"\n[cyan bold]{escape(decision_id)}[/]")
        concerns = [o for o in outcomes if o is not None]
        if not concerns:
            console.print("  [green]no concerns reachable[/]")
            continue
        for concern in concerns:
            console.print(f"  [red]⚠[/] {escape(concern.title)} [dim]({concern.key})[/]")
            if details:
                console.print(f"    [dim]{escape(concern.body)}[/]")


def render(lab: Laboratory, show_details: Optional[bool] = None) -> None:
    """Print the whole catalogue for a session."""
    config = click.get_current_context().obj["config"]
    if show_details is None:
        show_details = config.display.show_details
    console.print(
        build_table(
            lab.rows(),
            show_details=show_details,
            concern_width=config.display.concern_width,
        )
    )
