"""Snapshot export and import CLI commands."""

import sys

import click

from cli.utils import console, get_lab, render


@click.command()
@click.option("-l", "--link", default="", help="Start from a shared link or fragment")
@click.option("--url", "as_url", is_flag=True, help="Print a shareable URL instead of JSON")
@click.option("-o", "--output", type=click.Path(dir_okay=False), help="Write to a file instead of stdout")
def export(link: str, as_url: bool, output: str):
    """Export the current selections of available tweakables."""
    from lab.snapshot import export_text

    lab = get_lab(link)
    text = lab.save_link() if as_url else export_text(lab.store)

    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(text + "\n")
        console.print(f"[green]Exported to {output}[/]")
    else:
        click.echo(text)


@click.command("import")
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.option("-l", "--link", default="", help="Start from a shared link or fragment")
def import_cmd(source, link: str):
    """Load selections from a JSON snapshot file (use - for stdin)."""
    lab = get_lab(link)
    text = source.read()

    if not text.strip():
        console.print("[yellow]Nothing to import.[/]")
        return
    if not lab.load_text(text):
        console.print("[red]Could not parse snapshot:[/] expected a JSON object")
        sys.exit(1)

    render(lab)
    console.print(f"\n[bold]Link:[/] {lab.save_link()}", soft_wrap=True)
