"""
unsplashed

Browse Unsplash and authorize the client against your account from the command line.

This module defines the entry point to the unsplashed CLI. It defines an 'unsplashed' command
group which loads configuration and sets up output verbosity, then hands off to one of the
subcommands found in the subcommands package (authorize, random, search, stats, download).

Credentials are read from the environment (or a .env file):

    UNSPLASH_CLIENT_ID       application access key (required)
    UNSPLASH_CLIENT_SECRET   application secret key (authorize only)
    UNSPLASH_REDIRECT_URI    redirect uri registered for the application (authorize only)
"""

import logging
from io import StringIO

import click
from rich.logging import RichHandler

from unsplashed import config
from unsplashed.cli_utils.console import console, error_console
from unsplashed.cli_utils.decorators import catch_errors
from unsplashed.cli_utils.state import CliState
from unsplashed.cli_utils.utils import attach_commands, import_commands


@click.group()
@click.option(
    "--verbose",
    "verbosity",
    flag_value="verbose",
    help="Log every API request to stderr.",
)
@click.option(
    "--quiet",
    "verbosity",
    flag_value="quiet",
    help="Silence all output printed to the stdout or the terminal.",
)
@click.version_option(package_name="unsplashed")
@click.pass_context
@catch_errors
def cli(ctx: click.Context, verbosity):
    """
    unsplashed

    Browse Unsplash photos from the command line.


    ====================
    Quickstart
    ====================

    Get a random photo:

        $ unsplashed random

    Search photos:

        $ unsplashed search "new york city" --per-page 5

    Download a photo to your ~/unsplashed folder:

        $ unsplashed download bLqKgljgpf4

    Authorize against your account to obtain a user access token:

        $ unsplashed authorize --scope write_likes --scope read_user
    """

    if verbosity == "verbose":
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=error_console, show_path=False)],
            force=True,
        )

    # if verbosity is set to quiet, capture all output to a junk stream.
    if verbosity == "quiet":
        console.file = StringIO()

    ctx.obj = CliState(config=config.init())


def main():

    commands = import_commands()
    attach_commands(cli, commands)
    cli()


if __name__ == "__main__":
    main()
