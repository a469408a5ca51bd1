"""
unsplashed

A client for the Unsplash API: resource services for photos, users, collections, topics,
search and stats, plus the OAuth2 authorization-code flow for acting on a user's behalf.
"""

from unsplashed.auth import AuthorizationFlow
from unsplashed.auth import private_client
from unsplashed.client import Client
from unsplashed.client import new_client
from unsplashed.config import UnsplashConfig
from unsplashed.scopes import AuthScopes
from unsplashed.unsplash import Unsplash

__version__ = "0.1.0"

__all__ = [
    "AuthScopes",
    "AuthorizationFlow",
    "Client",
    "Unsplash",
    "UnsplashConfig",
    "new_client",
    "private_client",
]
