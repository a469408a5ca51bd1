"""
unsplashed random

This module defines the 'random' subcommand, which prints one or more random photos from
Unsplash, optionally limited to a search query.
"""

import click

from unsplashed.cli_utils.console import describe
from unsplashed.cli_utils.decorators import catch_errors
from unsplashed.cli_utils.state import CliState, pass_state
from unsplashed.models import ManyPhotos


@click.command(name="random")
@click.option(
    "--query",
    "-q",
    help="Limit selection to photos matching a search term.",
)
@click.option(
    "--orientation",
    type=click.Choice(["landscape", "portrait", "squarish"]),
    help="Filter by photo orientation.",
)
@click.option(
    "--count",
    type=click.IntRange(1, 30),
    help="Number of random photos to get (max 30).",
)
@pass_state
@catch_errors
def cli(state: CliState, query, orientation, count):
    """Get random photos from Unsplash."""

    params = {}
    if query:
        params["query"] = query
    if orientation:
        params["orientation"] = orientation
    if count:
        params["count"] = str(count)

    result = state.unsplash.photos.random(params)
    photos = result.photos if isinstance(result, ManyPhotos) else [result.photo]

    for photo in photos:
        describe(
            f":game_die-emoji: {photo.id} by {photo.user.name or photo.user.username}: {photo.urls.regular}",
            soft_wrap=True,
        )
