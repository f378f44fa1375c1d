"""Interactive laboratory shell."""

import click
import structlog
from rich.markup import escape

from cli.utils import console, get_lab, parse_value, print_issues, print_report, render

logger = structlog.get_logger()

HELP = """Commands:
  set ID=VALUE     select a value (JSON literal, e.g. false or "object")
  shuffle          pick random values for every tweakable
  load JSON        apply a pasted JSON snapshot
  export           print the JSON snapshot
  url              save the state as a shareable link
  report [ID]      list the concerns a tweakable (or every one) can raise
  table            redraw the table
  help             show this message
  quit             leave the shell"""


def _report(lab, decision_id: str) -> None:
    from lab.discovery import build_report, discover

    if not decision_id:
        print_report(build_report(lab.catalogue))
        return
    decision = lab.catalogue.get(decision_id)
    if decision is None:
        console.print(f"[yellow]Unknown decision:[/] {escape(decision_id)}")
        return
    print_report({decision_id: discover(decision)})


def run_command(lab, line: str) -> bool:
    """Execute one shell line against ``lab``. Returns False when the shell should exit."""
    from lab.snapshot import export_text

    command, _, rest = line.strip().partition(" ")
    rest = rest.strip()

    if command in ("quit", "exit"):
        return False
    if command == "set":
        if "=" not in rest:
            console.print("[yellow]usage:[/] set ID=VALUE")
        else:
            decision_id, raw = (part.strip() for part in rest.rsplit("=", 1))
            if decision_id in lab.catalogue and not lab.editable(decision_id):
                console.print(f"[yellow]Not editable:[/] {escape(decision_id)}")
            elif not lab.select(decision_id, parse_value(raw)):
                console.print(f"[yellow]No change:[/] {escape(rest)}")
    elif command == "shuffle":
        lab.shuffle()
    elif command == "load":
        if not lab.load_text(rest):
            console.print("[yellow]Could not parse snapshot[/]")
    elif command == "export":
        click.echo(export_text(lab.store))
    elif command == "url":
        console.print(lab.save_link(), soft_wrap=True)
    elif command == "report":
        _report(lab, rest)
    elif command == "table":
        lab.painter.schedule()
    elif command in ("help", "?"):
        console.print(HELP)
    elif command:
        console.print(f"[yellow]Unknown command:[/] {escape(command)} (try 'help')")
    return True


@click.command()
@click.option("-l", "--link", default="", help="Start from a shared link or fragment")
def shell(link: str):
    """Explore the design space interactively."""
    lab = get_lab(link)
    print_issues(lab.issues)
    render(lab)
    lab.render = render
    console.print("Type 'help' for commands.")

    while True:
        try:
            line = click.prompt("lab", default="", show_default=False, prompt_suffix="> ")
        except (EOFError, click.Abort):
            break
        if not run_command(lab, line):
            break
        lab.end_turn()

    logger.debug("shell_exit", fragment=lab.fragment)
