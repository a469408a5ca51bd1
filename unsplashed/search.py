"""
Search

Get a single page of search results for photos, collections or users. Every search needs
a non-empty `query` parameter; a search without one is refused before any request is sent.

https://unsplash.com/documentation#search
"""

from unsplashed.client import build_url
from unsplashed.errors import QueryParamMissing
from unsplashed.models import CollectionSearchResult
from unsplashed.models import PhotoSearchResult
from unsplashed.models import UserSearchResult
from unsplashed.service import Service


def with_query(query: str, query_params: dict = None) -> dict:
    """Merge a search query into a copy of query_params."""

    params = dict(query_params or {})
    if query:
        params["query"] = query
    return params


class SearchService(Service):
    def _search(self, resource: str, model, query_params: dict = None):
        endpoint = self.config.endpoint("search", resource)
        params = dict(query_params or {})

        if not str(params.get("query", "")).strip():
            raise QueryParamMissing(build_url(endpoint, params))

        return self._get(endpoint, model, params)

    def photos(self, query_params: dict) -> PhotoSearchResult:
        """Optional parameters: page, per_page, order_by, collections, content_filter, color, orientation."""

        return self._search("photos", PhotoSearchResult, query_params)

    def collections(self, query_params: dict) -> CollectionSearchResult:
        return self._search("collections", CollectionSearchResult, query_params)

    def users(self, query_params: dict) -> UserSearchResult:
        return self._search("users", UserSearchResult, query_params)
