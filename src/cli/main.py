"""moodcheck CLI entry point."""

import sys

import click
from rich.console import Console

from cli.commands import (
    add,
    coach,
    delete,
    edit,
    export,
    history,
    init,
    patterns,
    show,
    stats,
    trends,
)
from cli.config import get_paths, load_config_model
from cli.logging_config import setup_logging

console = Console()


@click.group()
@click.version_option(version="0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON lines")
def cli(verbose: bool, json_logs: bool):
    """moodcheck - mood journal with AI sentiment, trends and coaching."""
    try:
        config = load_config_model()
    except ValueError as e:
        console.print(f"[red]Config error:[/] {e}")
        sys.exit(1)

    log_cfg = config.logging
    log_file = get_paths(config.to_dict())["log_file"] if log_cfg.to_file else None
    setup_logging(
        json_mode=json_logs or log_cfg.json_logs,
        level="DEBUG" if verbose else log_cfg.level,
        log_file=log_file,
        file_level=log_cfg.file_level,
    )


for command in (add, history, show, edit, delete, trends, stats, patterns, coach, export, init):
    cli.add_command(command)


if __name__ == "__main__":
    cli()
