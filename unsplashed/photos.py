"""
Photos

https://unsplash.com/documentation#photos

Listing, fetching and searching photos works with any client. Updating, liking and
unliking act on behalf of a user and need a private client with the matching scope.
"""

from pathlib import Path

from unsplashed import image_handler
from unsplashed import scopes
from unsplashed.models import LikeResponse
from unsplashed.models import Link
from unsplashed.models import ManyPhotos
from unsplashed.models import Photo
from unsplashed.models import PhotoStats
from unsplashed.models import PhotoSearchResult
from unsplashed.models import RandomPhotos
from unsplashed.models import SinglePhoto
from unsplashed.models import decode
from unsplashed.search import SearchService
from unsplashed.search import with_query
from unsplashed.service import Service


class PhotosService(Service):
    def all(self, query_params: dict = None) -> list[Photo]:
        """Get a single page from the list of all photos. Parameters: page, per_page, order_by."""

        return self._get(self.config.endpoint("photos"), list[Photo], query_params)

    def get(self, photo_id: str) -> Photo:
        return self._get(self.config.endpoint("photos", photo_id), Photo)

    def random(self, query_params: dict = None) -> RandomPhotos:
        """
        Get a random photo as SinglePhoto. When a count parameter is supplied the API answers
        with a list of photos instead (even for count=1) and ManyPhotos is returned.
        """

        params = dict(query_params or {})
        data = self.client.dispatch(
            "GET", self.config.endpoint("photos", "random"), query_params=params
        )

        if "count" in params:
            return ManyPhotos(decode(data, list[Photo]))
        return SinglePhoto(decode(data, Photo))

    def stats(self, photo_id: str, query_params: dict = None) -> PhotoStats:
        """Downloads, views and likes of a photo with their historical breakdown (default 30 days)."""

        return self._get(
            self.config.endpoint("photos", photo_id, "statistics"),
            PhotoStats,
            query_params,
        )

    def search(self, query: str, query_params: dict = None) -> PhotoSearchResult:
        return SearchService(self.client).photos(with_query(query, query_params))

    def update(self, photo_id: str, data: dict) -> Photo:
        """Update a photo on behalf of the logged-in user. Requires the write_photos scope."""

        return self._request(
            "PUT",
            self.config.endpoint("photos", photo_id),
            Photo,
            body=data,
            required_scope=scopes.WRITE_PHOTOS,
        )

    def like(self, photo_id: str) -> LikeResponse:
        """Like a photo on behalf of the logged-in user. Requires the write_likes scope."""

        return self._request(
            "POST",
            self.config.endpoint("photos", photo_id, "like"),
            LikeResponse,
            required_scope=scopes.WRITE_LIKES,
        )

    def unlike(self, photo_id: str) -> None:
        """Remove the logged-in user's like of a photo. Responds 204 with an empty body."""

        self._request(
            "DELETE",
            self.config.endpoint("photos", photo_id, "like"),
            required_scope=scopes.WRITE_LIKES,
        )

    def download_url(self, photo: Photo) -> str:
        """
        Hit the photo's download_location to record the download, as the API guidelines
        require, and return the url of the image file.
        """

        data = self.client.dispatch("GET", photo.links.download_location)
        return decode(data, Link).url

    def download(self, photo: Photo, file_path=None) -> Path:
        """
        Record a download and save the image. file_path defaults to the photo id inside the
        configured download_dir.
        """

        url = self.download_url(photo)
        if file_path is None:
            file_path = self.config.download_dir / photo.id

        return image_handler.download_image(
            url, file_path, session=self.client.session, timeout=self.config.timeout
        )
