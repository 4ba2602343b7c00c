"""AI coaching CLI command."""

import click
from rich.console import Console
from rich.markdown import Markdown

from cli.utils import get_components, handle_storage_errors

from .entries import MOOD_CHOICE

console = Console()


@click.command()
@click.argument("mood", type=MOOD_CHOICE)
@click.argument("description")
@handle_storage_errors
def coach(mood: str, description: str):
    """Get a coaching suggestion for how you feel now, based on your history."""
    c = get_components()
    if c["llm"] is None:
        console.print("[dim]No LLM configured; using built-in suggestions.[/]")

    with console.status("Thinking..."):
        advice = c["coach"].get_coaching(mood, description)

    console.print(Markdown(advice))
