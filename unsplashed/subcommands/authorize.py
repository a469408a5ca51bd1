"""
unsplashed authorize

This module defines the 'authorize' subcommand, which walks the user through the OAuth2
authorization-code flow and prints the resulting access token. The user opens the printed
url, approves the requested scopes and pastes back the code from the redirect.
"""

import click

from unsplashed import scopes
from unsplashed.auth import AuthorizationFlow
from unsplashed.auth import prompt_for_code
from unsplashed.cli_utils.console import confirm_success, describe, error_console
from unsplashed.cli_utils.decorators import catch_errors
from unsplashed.cli_utils.state import CliState, pass_state
from unsplashed.errors import UnsplashConfigError


@click.command(name="authorize")
@click.option(
    "--scope",
    "-s",
    "requested",
    multiple=True,
    type=click.Choice(scopes.ALL_SCOPES),
    help="Scope to request in addition to 'public'. Can use multiple times e.g. -s read_user -s write_likes",
)
@pass_state
@catch_errors
def cli(state: CliState, requested):
    """Authorize unsplashed against your account and print a user access token."""

    credentials = state.credentials
    if not credentials.client_secret:
        raise UnsplashConfigError(
            "UNSPLASH_CLIENT_SECRET is required to exchange an authorization code."
        )

    flow = AuthorizationFlow(
        credentials.client_id,
        credentials.client_secret,
        credentials.redirect_uri,
        requested,
        config=state.config,
    )

    flow.request_authorization()
    flow.obtain_code(lambda url: prompt_for_code(url, console=error_console))
    auth_response = flow.exchange_code()
    flow.finalize()

    confirm_success(":white_check_mark-emoji: authorized")
    describe(f"access token: {auth_response.access_token}", soft_wrap=True)
    describe(f"token type: {auth_response.token_type}")
    describe(f"granted scopes: {auth_response.scope}")
