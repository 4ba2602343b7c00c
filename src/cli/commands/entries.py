"""Mood entry CLI commands: add, history, show, edit, delete."""

import sys

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from cli.utils import get_components, handle_storage_errors, truncate
from shared_types import MoodType

console = Console()

MOOD_CHOICE = click.Choice([m.value for m in MoodType], case_sensitive=False)

MOOD_STYLE = {
    MoodType.HAPPY: "[green]Happy[/]",
    MoodType.NEUTRAL: "[yellow]Neutral[/]",
    MoodType.SAD: "[blue]Sad[/]",
}


def mood_label(mood_type: str) -> str:
    return MOOD_STYLE.get(mood_type, f"[dim]{mood_type}[/]")


def score_label(score) -> str:
    return f"{score:.2f}" if score is not None else "[dim]-[/]"


@click.command()
@click.argument("mood", type=MOOD_CHOICE)
@click.argument("description", required=False)
@click.option(
    "--date", "entry_date", type=click.DateTime(formats=["%Y-%m-%d"]), help="Entry day (default today)"
)
@click.option("--coach", "with_coaching", is_flag=True, help="Show a coaching suggestion after saving")
@handle_storage_errors
def add(mood: str, description: str, entry_date, with_coaching: bool):
    """Record a mood. Opens editor if no description provided."""
    if not description:
        description = click.edit("\n# Describe how you feel. Lines starting with # are ignored.\n")
        if description:
            description = "\n".join(
                line for line in description.splitlines() if not line.startswith("#")
            )
    if not description or not description.strip():
        raise click.UsageError("Description cannot be empty.")

    c = get_components()
    with console.status("Scoring sentiment..."):
        entry = c["storage"].create(
            mood_type=mood,
            description=description.strip(),
            entry_date=entry_date.date() if entry_date else None,
        )

    console.print(
        f"[green]Saved entry #{entry.id}[/] {entry.formatted_date} {mood_label(entry.mood_type)} "
        f"(sentiment {score_label(entry.sentiment_score)}, {entry.sentiment_category})"
    )

    if with_coaching:
        with console.status("Asking your coach..."):
            advice = c["coach"].get_coaching(entry.mood_type, entry.description)
        console.print(Panel(advice, title="Coach", border_style="cyan"))


@click.command()
@click.option("-n", "--limit", default=20, help="Max entries to show")
@click.option("-d", "--days", type=int, help="Only entries from the last N days")
@handle_storage_errors
def history(limit: int, days: int):
    """List recent mood entries, newest first."""
    c = get_components(skip_llm=True)
    if days:
        entries = c["storage"].list_last_days(days)[:limit]
    else:
        entries = c["storage"].list_recent(limit)

    if not entries:
        console.print("[yellow]No entries found. Record one with `moodcheck add`.[/]")
        return

    table = Table(show_header=True, title="Mood history")
    table.add_column("ID", justify="right", style="dim")
    table.add_column("Date")
    table.add_column("Mood")
    table.add_column("AI", justify="right")
    table.add_column("Description")

    for entry in entries:
        table.add_row(
            str(entry.id),
            entry.formatted_date,
            mood_label(entry.mood_type),
            score_label(entry.sentiment_score),
            truncate(entry.description),
        )

    console.print(table)


@click.command()
@click.argument("entry_id", type=int)
@handle_storage_errors
def show(entry_id: int):
    """Show one entry in full."""
    c = get_components(skip_llm=True)
    entry = c["storage"].get(entry_id)
    if entry is None:
        console.print(f"[red]No entry with id {entry_id}[/]")
        sys.exit(1)

    console.print(f"[bold]#{entry.id}[/] {entry.formatted_date}  {mood_label(entry.mood_type)}")
    console.print(
        f"[dim]Sentiment:[/] {score_label(entry.sentiment_score)} ({entry.sentiment_category})"
        f"  [dim]Created:[/] {entry.created_at or '-'}"
    )
    console.print()
    console.print(entry.description)


@click.command()
@click.argument("entry_id", type=int)
@click.option("-m", "--mood", type=MOOD_CHOICE, help="New mood")
@click.option("-t", "--text", "description", help="New description")
@handle_storage_errors
def edit(entry_id: int, mood: str, description: str):
    """Change an entry's mood or description. Opens editor if neither given."""
    c = get_components()
    entry = c["storage"].get(entry_id)
    if entry is None:
        console.print(f"[red]No entry with id {entry_id}[/]")
        sys.exit(1)

    if mood is None and description is None:
        description = click.edit(entry.description)
        if description is None:
            console.print("[yellow]No changes.[/]")
            return

    if description is not None and not description.strip():
        raise click.UsageError("Description cannot be empty.")

    updated = c["storage"].update(
        entry_id,
        mood_type=mood,
        description=description.strip() if description is not None else None,
    )
    console.print(
        f"[green]Updated entry #{updated.id}[/] {mood_label(updated.mood_type)} "
        f"(sentiment {score_label(updated.sentiment_score)})"
    )


@click.command()
@click.argument("entry_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
@handle_storage_errors
def delete(entry_id: int, yes: bool):
    """Delete an entry."""
    c = get_components(skip_llm=True)
    entry = c["storage"].get(entry_id)
    if entry is None:
        console.print(f"[red]No entry with id {entry_id}[/]")
        sys.exit(1)

    if not yes:
        click.confirm(
            f"Delete #{entry.id} ({entry.formatted_date}, {entry.mood_type})?", abort=True
        )

    c["storage"].delete(entry_id)
    console.print(f"[green]Deleted entry #{entry_id}[/]")
