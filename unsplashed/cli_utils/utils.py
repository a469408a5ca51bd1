"""
unsplashed CLI Utilities

Import subcommands from the subcommands package and attach them to the command group.
"""

import importlib
import pkgutil

import click

import unsplashed.subcommands

from unsplashed.cli_utils.console import warn


def import_commands(package=unsplashed.subcommands) -> list[click.Command]:
    """
    Retrieve a set of click Commands from the modules of package. Default package is the built
    in subcommands package.

    A valid unsplashed command module defines a "cli" function wrapped as a click Command object.
    Set the 'name' keyword argument in the @click.command decorator to set the name of the
    command intended for the end user.
    """

    commands = []

    for module_info in pkgutil.iter_modules(package.__path__):
        name = module_info.name
        module = importlib.import_module(f"{package.__name__}.{name}")

        cli = getattr(module, "cli", None)
        if isinstance(cli, click.Command):
            commands.append(cli)
        else:
            warn(f"Cannot add command {name}: no 'cli' command found.")

    return commands


def attach_commands(group: click.Group, commands: list[click.Command]):
    """
    Attach each command in a list of click Command objects to a provided group. Useful when
    retrieving a dynamic list of subcommands with import_commands().
    """

    for command in commands:
        group.add_command(command)

