"""Command-line interface package."""

from src.cli.dispatcher import COMMANDS, USAGE, main, run, show_results, show_usage
from src.cli.options import parse_options

__all__ = [
    "COMMANDS",
    "USAGE",
    "main",
    "parse_options",
    "run",
    "show_results",
    "show_usage",
]
