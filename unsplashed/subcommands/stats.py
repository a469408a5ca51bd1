"""
unsplashed stats

This module defines the 'stats' subcommand, which prints overall Unsplash statistics.
"""

from dataclasses import asdict

import click

from unsplashed.cli_utils.console import describe
from unsplashed.cli_utils.decorators import catch_errors
from unsplashed.cli_utils.state import CliState, pass_state


@click.command(name="stats")
@click.option(
    "--month",
    is_flag=True,
    default=False,
    help="Show stats for the past 30 days instead of all-time totals.",
)
@pass_state
@catch_errors
def cli(state: CliState, month):
    """Show Unsplash statistics."""

    stats = state.unsplash.stats.month() if month else state.unsplash.stats.total()

    for name, value in asdict(stats).items():
        describe(f"{name.replace('_', ' ')}: {value:,}")
