"""Mood data export CLI commands."""

from pathlib import Path

import click
from rich.console import Console

from cli.utils import get_components, handle_storage_errors

console = Console()


@click.group()
def export():
    """Export mood entries."""
    pass


@export.command("json")
@click.option("-o", "--output", required=True, type=click.Path(), help="Output path")
@click.option("-d", "--days", type=click.IntRange(min=1), help="Only entries from the last N days")
@handle_storage_errors
def export_json(output: str, days: int):
    """Export entries to a JSON file."""
    from mood.export import MoodExporter

    c = get_components(skip_llm=True)
    count = MoodExporter(c["storage"]).export_json(Path(output), days=days)
    console.print(f"[green]Exported {count} entries to {output}[/]")


@export.command("csv")
@click.option("-o", "--output", required=True, type=click.Path(), help="Output path")
@click.option("-d", "--days", type=click.IntRange(min=1), help="Only entries from the last N days")
@handle_storage_errors
def export_csv(output: str, days: int):
    """Export entries to a CSV file."""
    from mood.export import MoodExporter

    c = get_components(skip_llm=True)
    count = MoodExporter(c["storage"]).export_csv(Path(output), days=days)
    console.print(f"[green]Exported {count} entries to {output}[/]")
