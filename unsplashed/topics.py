"""
Topics

https://unsplash.com/documentation#topics
"""

from unsplashed.models import Photo
from unsplashed.models import Topic
from unsplashed.service import Service


class TopicsService(Service):
    def all(self, query_params: dict = None) -> list[Topic]:
        """Parameters: ids, page, per_page, order_by."""

        return self._get(self.config.endpoint("topics"), list[Topic], query_params)

    def get(self, id_or_slug: str) -> Topic:
        return self._get(self.config.endpoint("topics", id_or_slug), Topic)

    def photos(self, id_or_slug: str, query_params: dict = None) -> list[Photo]:
        return self._get(
            self.config.endpoint("topics", id_or_slug, "photos"), list[Photo], query_params
        )
