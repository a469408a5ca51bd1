"""
Collections

https://unsplash.com/documentation#collections

Every mutation acts on one of the logged-in user's collections and requires the
write_collections scope.
"""

from unsplashed import scopes
from unsplashed.models import Collection
from unsplashed.models import CollectionActionResponse
from unsplashed.models import CollectionSearchResult
from unsplashed.models import Photo
from unsplashed.search import SearchService
from unsplashed.search import with_query
from unsplashed.service import Service


class CollectionsService(Service):
    def all(self, query_params: dict = None) -> list[Collection]:
        return self._get(self.config.endpoint("collections"), list[Collection], query_params)

    def get(self, collection_id: str) -> Collection:
        return self._get(self.config.endpoint("collections", collection_id), Collection)

    def photos(self, collection_id: str, query_params: dict = None) -> list[Photo]:
        return self._get(
            self.config.endpoint("collections", collection_id, "photos"),
            list[Photo],
            query_params,
        )

    def related(self, collection_id: str) -> list[Collection]:
        return self._get(
            self.config.endpoint("collections", collection_id, "related"), list[Collection]
        )

    def search(self, query: str, query_params: dict = None) -> CollectionSearchResult:
        return SearchService(self.client).collections(with_query(query, query_params))

    # methods requiring private authentication

    def create(self, data: dict) -> Collection:
        """Create a new collection. data: title (required), description, private."""

        return self._request(
            "POST",
            self.config.endpoint("collections"),
            Collection,
            body=data,
            required_scope=scopes.WRITE_COLLECTIONS,
        )

    def update(self, collection_id: str, data: dict) -> Collection:
        return self._request(
            "PUT",
            self.config.endpoint("collections", collection_id),
            Collection,
            body=data,
            required_scope=scopes.WRITE_COLLECTIONS,
        )

    def delete(self, collection_id: str) -> None:
        """Delete a collection. Responds 204 with an empty body."""

        self._request(
            "DELETE",
            self.config.endpoint("collections", collection_id),
            required_scope=scopes.WRITE_COLLECTIONS,
        )

    def add_photo(self, collection_id: str, data: dict) -> CollectionActionResponse:
        """Add a photo to a collection. data must carry photo_id."""

        return self._request(
            "POST",
            self.config.endpoint("collections", collection_id, "add"),
            CollectionActionResponse,
            body=data,
            required_scope=scopes.WRITE_COLLECTIONS,
        )

    def remove_photo(self, collection_id: str, data: dict) -> CollectionActionResponse:
        """Remove a photo from a collection. data must carry photo_id."""

        return self._request(
            "DELETE",
            self.config.endpoint("collections", collection_id, "remove"),
            CollectionActionResponse,
            body=data,
            required_scope=scopes.WRITE_COLLECTIONS,
        )
