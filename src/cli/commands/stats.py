"""Mood statistics and pattern CLI commands."""

import click
from rich.console import Console
from rich.table import Table

from cli.utils import get_components, handle_storage_errors, truncate

console = Console()


def _counts_table(title: str, stats) -> Table:
    table = Table(title=title, show_header=True)
    table.add_column("Mood")
    table.add_column("Count", justify="right")
    table.add_column("Share", justify="right")

    total = stats.total
    for label, count in (
        ("[green]Happy[/]", stats.happy_count),
        ("[yellow]Neutral[/]", stats.neutral_count),
        ("[blue]Sad[/]", stats.sad_count),
    ):
        share = f"{count / total:.0%}" if total else "-"
        table.add_row(label, str(count), share)
    return table


@click.command()
@click.option("-d", "--days", default=30, type=click.IntRange(min=1), help="Lookback days")
@handle_storage_errors
def stats(days: int):
    """Mood counts and averages for the last N days."""
    c = get_components(skip_llm=True)
    result = c["analyzer"].get_mood_statistics(days)

    if result.total == 0:
        console.print(f"[yellow]No entries in the last {days} days.[/]")
        return

    console.print(_counts_table(f"Mood statistics - last {days} days", result))
    console.print(
        f"\n[bold]Average mood:[/] {result.avg_mood_score:.2f} / 5  |  "
        f"[bold]Average AI sentiment:[/] {result.avg_sentiment_score:.2f}"
    )


@click.command()
@handle_storage_errors
def patterns():
    """Overall mood pattern across all history."""
    c = get_components(skip_llm=True)
    result = c["analyzer"].get_mood_patterns()

    if result.total == 0:
        console.print(f"[yellow]{result.overall_pattern}. Record a mood with `moodcheck add`.[/]")
        return

    console.print(_counts_table("Mood patterns - all time", result))
    console.print(f"\n[bold]Pattern:[/] {result.overall_pattern}")
    console.print(
        f"[bold]Average mood:[/] {result.avg_mood_score:.2f} / 5  |  "
        f"[bold]Average AI sentiment:[/] {result.avg_sentiment_score:.2f}"
    )

    if result.recent_happy_moments:
        console.print("\n[green]Recent happy moments[/]")
        for moment in result.recent_happy_moments:
            console.print(f"  • {truncate(moment, 70)}")
    if result.recent_sad_moments:
        console.print("\n[blue]Recent sad moments[/]")
        for moment in result.recent_sad_moments:
            console.print(f"  • {truncate(moment, 70)}")
