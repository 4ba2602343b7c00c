"""Mood vs. AI sentiment trend CLI command."""

import click
from rich.console import Console
from rich.table import Table

from cli.config_models import VALID_TREND_WINDOWS
from cli.utils import get_components, handle_storage_errors

console = Console()

_BLOCKS = "▁▂▃▄▅▆▇█"


def spark(value: float) -> str:
    """One block character for a 0-1 value."""
    value = min(1.0, max(0.0, value))
    return _BLOCKS[round(value * (len(_BLOCKS) - 1))]


@click.command()
@click.option(
    "-d",
    "--days",
    type=click.Choice([str(d) for d in VALID_TREND_WINDOWS]),
    help="Lookback window in days (default from config)",
)
@handle_storage_errors
def trends(days: str):
    """Show daily mood vs. AI sentiment averages."""
    from mood.trends import is_chartable

    c = get_components(skip_llm=True)
    window = int(days) if days else c["config_model"].trends.default_days

    points = c["aggregator"].find_daily_averages(window)

    if not points:
        console.print(f"[yellow]No mood data in the last {window} days.[/]")
        return

    if not is_chartable(points):
        console.print(
            f"[yellow]Only {len(points)} day(s) with data ({points[0].date}). "
            "Need entries on at least 2 different dates to show a trend.[/]"
        )

    table = Table(title=f"Mood vs. AI Sentiment ({window} days)", show_header=True)
    table.add_column("Date", style="dim")
    table.add_column("Mood (1-5)", justify="right")
    table.add_column("Mood (0-1)", justify="right")
    table.add_column("AI (0-1)", justify="right")
    table.add_column("Mood / AI", justify="center")

    for point in points:
        mood = point.normalized_mood
        table.add_row(
            point.date.isoformat(),
            f"{point.avg_mood:.2f}",
            f"{mood:.2f}",
            f"{point.avg_ai:.2f}",
            f"[green]{spark(mood)}[/] [cyan]{spark(point.avg_ai)}[/]",
        )

    console.print(table)

    if is_chartable(points):
        mood_line = "".join(spark(p.normalized_mood) for p in points)
        ai_line = "".join(spark(p.avg_ai) for p in points)
        console.print(f"\n[green]Mood[/] {mood_line}\n[cyan]AI  [/] {ai_line}")
