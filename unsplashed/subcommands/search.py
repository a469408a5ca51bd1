"""
unsplashed search

This module defines the 'search' subcommand, which prints a page of photo search results.
"""

import click

from unsplashed.cli_utils.console import describe, warn
from unsplashed.cli_utils.decorators import catch_errors
from unsplashed.cli_utils.state import CliState, pass_state


@click.command(name="search")
@click.argument("query")
@click.option("--page", type=click.IntRange(min=1), default=1, show_default=True)
@click.option(
    "--per-page", type=click.IntRange(1, 30), default=10, show_default=True
)
@pass_state
@catch_errors
def cli(state: CliState, query, page, per_page):
    """Search photos on Unsplash."""

    result = state.unsplash.photos.search(
        query, {"page": str(page), "per_page": str(per_page)}
    )

    if not result.results:
        warn(f"no photos found for '{query}'")
        return

    describe(f"{result.total} photos found, page {page} of {result.total_pages}")
    for photo in result.results:
        description = photo.alt_description or photo.description or ""
        describe(f"{photo.id}  {description}  {photo.urls.regular}", soft_wrap=True)
