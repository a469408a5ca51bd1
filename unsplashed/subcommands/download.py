"""
unsplashed download

This module defines the 'download' subcommand, which saves a photo to disk. The download is
recorded with Unsplash first, as the API guidelines require.
"""

from pathlib import Path

import click

from unsplashed.cli_utils.console import confirm_success, describe
from unsplashed.cli_utils.decorators import catch_errors
from unsplashed.cli_utils.state import CliState, pass_state


@click.command(name="download")
@click.argument("photo_id")
@click.option(
    "--dest",
    "-d",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory to save the photo in (default: the configured download_dir).",
)
@pass_state
@catch_errors
def cli(state: CliState, photo_id, dest):
    """Download a photo by id."""

    photos = state.unsplash.photos
    photo = photos.get(photo_id)

    describe(f":earth_asia-emoji: 'download' getting {photo.id} ...", end=" ")
    directory = dest if dest else state.config.download_dir
    file = photos.download(photo, directory / photo.id)

    confirm_success(
        f":white_check_mark-emoji: \n:floppy_disk-emoji: 'download' saved '{file.name}' to {file.parent}",
        soft_wrap=True,
    )
