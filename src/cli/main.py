"""CLI entry point for the Record & Tuple laboratory."""

import sys
from pathlib import Path

import click

from cli.commands import export, import_cmd, report, set_cmd, shell, shuffle, table
from cli.config import load_config_model
from cli.logging_config import setup_logging
from cli.utils import console


@click.group()
@click.version_option(version="0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON lines")
@click.option("-c", "--config", "config_path", type=click.Path(dir_okay=False, path_type=Path), help="Config file")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, json_logs: bool, config_path: Path):
    """Record & Tuple Laboratory - weigh design decisions and their concerns."""
    try:
        config = load_config_model(config_path)
    except ValueError as e:
        console.print(f"[red]Config error:[/] {e}")
        sys.exit(1)

    level = "DEBUG" if verbose else config.logging.level
    setup_logging(json_mode=json_logs or config.logging.json_mode, level=level, log_file=config.logging.file)
    ctx.obj = {"config": config}


cli.add_command(table)
cli.add_command(set_cmd)
cli.add_command(shuffle)
cli.add_command(export)
cli.add_command(import_cmd)
cli.add_command(report)
cli.add_command(shell)


def main():
    cli()


if __name__ == "__main__":
    main()
