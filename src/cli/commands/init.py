"""Init CLI command."""

from datetime import date, timedelta
from pathlib import Path

import click
import yaml
from rich.console import Console

from cli.config import get_paths, load_config
from cli.utils import handle_storage_errors

console = Console()

# (days ago, mood, description)
SAMPLE_ENTRIES = [
    (6, "Happy", "Went for a long walk in the park with a friend, felt great afterwards."),
    (5, "Neutral", "Ordinary work day, nothing special. Fine overall."),
    (4, "Sad", "Stressed about a deadline and slept badly. Feeling tired and worried."),
    (3, "Neutral", "A bit better today, got some work done."),
    (2, "Happy", "Cooked dinner for the family, everyone enjoyed it. Grateful."),
    (1, "Sad", "Felt lonely in the evening."),
    (0, "Happy", "Finished the project ahead of time. Proud and relaxed."),
]

MINIMAL_CONFIG = {
    "llm": {
        "provider": "auto",
    },
    "paths": {
        "db_path": "~/moodcheck/mood.db",
    },
    "sentiment": {
        "mode": "keyword",
    },
}


@click.command()
@click.option("--samples", is_flag=True, help="Add a week of sample entries for demo/onboarding")
@handle_storage_errors
def init(samples: bool):
    """Initialize the moodcheck database, config and optionally sample data."""
    from mood.sentiment import KeywordSentimentOracle, SentimentScorer
    from mood.storage import MoodStorage

    config = load_config()
    paths = get_paths(config)

    storage = MoodStorage(paths["db_path"], scorer=SentimentScorer(KeywordSentimentOracle()))
    console.print(f"[green]✓[/] database: {paths['db_path']}")

    config_path = Path.home() / "moodcheck" / "config.yaml"
    if not config_path.exists():
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w") as f:
            yaml.safe_dump(MINIMAL_CONFIG, f, default_flow_style=False)
        console.print(f"[green]✓[/] config: {config_path}")
    else:
        console.print(f"[dim]config exists: {config_path}[/]")

    if samples:
        today = date.today()
        for days_ago, mood, description in SAMPLE_ENTRIES:
            storage.create(mood, description, entry_date=today - timedelta(days=days_ago))
        console.print(f"[green]✓[/] added {len(SAMPLE_ENTRIES)} sample entries")

    console.print("\nNext: [bold]moodcheck add Happy \"...\"[/] or [bold]moodcheck trends[/]")
