"""CLI command modules."""

from .coach import coach
from .entries import add, delete, edit, history, show
from .export import export
from .init import init
from .stats import patterns, stats
from .trends import trends

__all__ = [
    "add",
    "history",
    "show",
    "edit",
    "delete",
    "trends",
    "stats",
    "patterns",
    "coach",
    "export",
    "init",
]
