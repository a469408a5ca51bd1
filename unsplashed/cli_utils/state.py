"""
CliState

Application data passed between the group and its subcommands through the click context.
Credentials and the API client are created on first use so that commands like --help
work without any credentials in the environment.
"""

from dataclasses import dataclass, field
from typing import Optional

import click

from unsplashed.client import Client
from unsplashed.config import Credentials
from unsplashed.config import UnsplashConfig
from unsplashed.config import load_credentials
from unsplashed.unsplash import Unsplash


@dataclass
class CliState:
    config: UnsplashConfig = field(default_factory=UnsplashConfig)
    _credentials: Optional[Credentials] = None
    _unsplash: Optional[Unsplash] = None

    @property
    def credentials(self) -> Credentials:
        if self._credentials is None:
            self._credentials = load_credentials()
        return self._credentials

    @property
    def unsplash(self) -> Unsplash:
        """Public (client id only) API facade."""

        if self._unsplash is None:
            self._unsplash = Unsplash(Client(self.credentials.client_id, config=self.config))
        return self._unsplash


pass_state = click.make_pass_decorator(CliState, ensure=True)
