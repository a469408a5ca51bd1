"""
Users

https://unsplash.com/documentation#users
https://unsplash.com/documentation#current-user
"""

from unsplashed import scopes
from unsplashed.models import Collection
from unsplashed.models import Link
from unsplashed.models import Photo
from unsplashed.models import User
from unsplashed.models import UserSearchResult
from unsplashed.models import UserStats
from unsplashed.search import SearchService
from unsplashed.search import with_query
from unsplashed.service import Service


class UsersService(Service):
    def _user_endpoint(self, username: str, *parts) -> str:
        return self.config.endpoint("users", username, *parts)

    def public_profile(self, username: str) -> User:
        return self._get(self._user_endpoint(username), User)

    def portfolio_url(self, username: str) -> str:
        """Retrieve a single user's portfolio link."""

        return self._get(self._user_endpoint(username, "portfolio"), Link).url

    def photos(self, username: str, query_params: dict = None) -> list[Photo]:
        """Photos uploaded by the user. Parameters: page, per_page, order_by, stats, orientation."""

        return self._get(self._user_endpoint(username, "photos"), list[Photo], query_params)

    def liked_photos(self, username: str, query_params: dict = None) -> list[Photo]:
        return self._get(self._user_endpoint(username, "likes"), list[Photo], query_params)

    def collections(self, username: str, query_params: dict = None) -> list[Collection]:
        return self._get(
            self._user_endpoint(username, "collections"), list[Collection], query_params
        )

    def stats(self, username: str, query_params: dict = None) -> UserStats:
        return self._get(self._user_endpoint(username, "statistics"), UserStats, query_params)

    def search(self, query: str, query_params: dict = None) -> UserSearchResult:
        return SearchService(self.client).users(with_query(query, query_params))

    # methods requiring private authentication

    def private_profile(self) -> User:
        """The authenticated user's profile. Requires the read_user scope."""

        return self._request(
            "GET", self.config.endpoint("me"), User, required_scope=scopes.READ_USER
        )

    def update_profile(self, data: dict) -> User:
        """Update the current user's profile. Requires the write_user scope."""

        return self._request(
            "PUT",
            self.config.endpoint("me"),
            User,
            body=data,
            required_scope=scopes.WRITE_USER,
        )
