"""
Unsplash Models

Dataclasses mirroring the JSON resources returned by the Unsplash API. They are passive
records: the only behavior is decoding. from_dict() builds a model from a decoded JSON
mapping, ignoring keys the model does not define and falling back to defaults for keys
the API omits (abbreviated objects leave out a lot). decode() goes from raw response
bytes to a model or a list of models and raises DecodeError on any mismatch.

Field names follow the API's JSON keys so that a record can be compared against the
API documentation at a glance: https://unsplash.com/documentation
"""

import json
import dataclasses
from dataclasses import dataclass, field
from typing import Any, Optional, Union, get_args, get_origin, get_type_hints

from unsplashed.errors import DecodeError


@dataclass
class Tag:
    title: str = ""


@dataclass
class Position:
    latitude: Optional[float] = None
    longitude: Optional[float] = None


@dataclass
class Location:
    city: Optional[str] = None
    country: Optional[str] = None
    position: Position = field(default_factory=Position)


@dataclass
class Exif:
    make: Optional[str] = None
    model: Optional[str] = None
    exposure_time: Optional[str] = None
    aperture: Optional[str] = None
    focal_length: Optional[str] = None
    iso: Optional[int] = None


@dataclass
class PhotoURLs:
    raw: str = ""
    full: str = ""
    regular: str = ""
    small: str = ""
    thumb: str = ""


@dataclass
class PhotoLinks:
    self: str = ""
    html: str = ""
    download: str = ""
    download_location: str = ""


@dataclass
class ProfileImage:
    small: str = ""
    medium: str = ""
    large: str = ""


@dataclass
class Badge:
    title: str = ""
    primary: bool = False
    slug: str = ""
    link: str = ""


@dataclass
class UserLinks:
    self: str = ""
    html: str = ""
    photos: str = ""
    likes: str = ""
    portfolio: str = ""
    following: str = ""
    followers: str = ""


@dataclass
class User:
    id: str = ""
    updated_at: Optional[str] = None
    username: str = ""
    name: Optional[str] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    instagram_username: Optional[str] = None
    twitter_username: Optional[str] = None
    portfolio_url: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    total_likes: int = 0
    total_photos: int = 0
    total_collections: int = 0
    followed_by_user: bool = False
    followers_count: int = 0
    following_count: int = 0
    downloads: int = 0
    uploads_remaining: int = 0
    accepted_tos: bool = False
    profile_image: ProfileImage = field(default_factory=ProfileImage)
    badge: Optional[Badge] = None
    links: UserLinks = field(default_factory=UserLinks)


@dataclass
class HistoricalValue:
    date: str = ""
    value: int = 0


@dataclass
class Historical:
    change: int = 0
    resolution: str = ""
    quantity: int = 0
    values: list[HistoricalValue] = field(default_factory=list)


@dataclass
class Stats:
    total: int = 0
    historical: Historical = field(default_factory=Historical)


@dataclass
class PhotoStatistics:
    downloads: Stats = field(default_factory=Stats)
    views: Stats = field(default_factory=Stats)
    likes: Stats = field(default_factory=Stats)


@dataclass
class CollectionLinks:
    self: str = ""
    html: str = ""
    photos: str = ""


@dataclass
class Photo:
    id: str = ""
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    promoted_at: Optional[str] = None
    width: int = 0
    height: int = 0
    color: Optional[str] = None
    downloads: int = 0
    blur_hash: Optional[str] = None
    likes: int = 0
    liked_by_user: bool = False
    description: Optional[str] = None
    alt_description: Optional[str] = None
    exif: Exif = field(default_factory=Exif)
    location: Location = field(default_factory=Location)
    tags: list[Tag] = field(default_factory=list)
    current_user_collections: list["Collection"] = field(default_factory=list)
    urls: PhotoURLs = field(default_factory=PhotoURLs)
    links: PhotoLinks = field(default_factory=PhotoLinks)
    user: User = field(default_factory=User)
    statistics: PhotoStatistics = field(default_factory=PhotoStatistics)


@dataclass
class Collection:
    id: str = ""
    title: str = ""
    description: Optional[str] = None
    published_at: Optional[str] = None
    last_collected_at: Optional[str] = None
    updated_at: Optional[str] = None
    featured: bool = False
    total_photos: int = 0
    private: bool = False
    share_key: Optional[str] = None
    cover_photo: Optional[Photo] = None
    user: User = field(default_factory=User)
    links: CollectionLinks = field(default_factory=CollectionLinks)


@dataclass
class TopicLinks:
    self: str = ""
    html: str = ""
    photos: str = ""


@dataclass
class Topic:
    id: str = ""
    slug: str = ""
    title: str = ""
    description: Optional[str] = None
    published_at: Optional[str] = None
    updated_at: Optional[str] = None
    starts_at: Optional[str] = None
    ends_at: Optional[str] = None
    featured: bool = False
    total_photos: int = 0
    links: TopicLinks = field(default_factory=TopicLinks)
    status: str = ""
    owners: list[User] = field(default_factory=list)
    top_contributors: list[User] = field(default_factory=list)
    current_user_contributions: list[Photo] = field(default_factory=list)
    total_current_user_submissions: int = 0
    cover_photo: Optional[Photo] = None
    preview_photos: list[Photo] = field(default_factory=list)


@dataclass
class PhotoStats:
    id: str = ""
    downloads: Stats = field(default_factory=Stats)
    views: Stats = field(default_factory=Stats)
    likes: Stats = field(default_factory=Stats)


@dataclass
class UserStats:
    username: str = ""
    downloads: Stats = field(default_factory=Stats)
    views: Stats = field(default_factory=Stats)


@dataclass
class StatsTotal:
    photos: int = 0
    downloads: int = 0
    views: int = 0
    likes: int = 0
    photographers: int = 0
    pixels: int = 0
    downloads_per_second: int = 0
    views_per_second: int = 0
    developers: int = 0
    applications: int = 0
    requests: int = 0


@dataclass
class StatsMonth:
    downloads: int = 0
    views: int = 0
    likes: int = 0
    new_photos: int = 0
    new_photographers: int = 0
    new_pixels: int = 0
    new_developers: int = 0
    new_applications: int = 0
    new_requests: int = 0


@dataclass
class LikeResponse:
    """Abbreviated photo and user returned when liking or unliking a photo."""

    photo: Photo = field(default_factory=Photo)
    user: User = field(default_factory=User)


@dataclass
class CollectionActionResponse:
    """Returned when a photo is added to or removed from a collection."""

    photo: Photo = field(default_factory=Photo)
    collection: Collection = field(default_factory=Collection)
    user: User = field(default_factory=User)
    created_at: Optional[str] = None


@dataclass
class PhotoSearchResult:
    total: int = 0
    total_pages: int = 0
    results: list[Photo] = field(default_factory=list)


@dataclass
class CollectionSearchResult:
    total: int = 0
    total_pages: int = 0
    results: list[Collection] = field(default_factory=list)


@dataclass
class UserSearchResult:
    total: int = 0
    total_pages: int = 0
    results: list[User] = field(default_factory=list)


@dataclass
class Link:
    """A bare `{"url": ...}` body, e.g. a user's portfolio or a photo's download location."""

    url: str = ""


@dataclass
class AuthResponse:
    """Token exchange result. Consumed once to build a private client."""

    access_token: str = ""
    token_type: str = ""
    scope: str = ""
    created_at: int = 0


"""
Random photo results

GET /photos/random returns a single photo, unless a count parameter is supplied, in which
case it returns a list (even when count is 1). The caller decides which shape to expect
by passing count, so the result is tagged with the variant instead of being inspected.
"""


@dataclass
class SinglePhoto:
    photo: Photo


@dataclass
class ManyPhotos:
    photos: list[Photo]


RandomPhotos = Union[SinglePhoto, ManyPhotos]


def _convert(hint, value):
    if value is None:
        return None

    origin = get_origin(hint)

    if origin is Union:
        inner = [arg for arg in get_args(hint) if arg is not type(None)]
        return _convert(inner[0], value) if len(inner) == 1 else value

    if origin is list:
        (item_hint,) = get_args(hint) or (Any,)
        if not isinstance(value, list):
            raise DecodeError(f"expected a list but got {type(value).__name__}")
        return [_convert(item_hint, item) for item in value]

    if dataclasses.is_dataclass(hint):
        return from_dict(hint, value)

    return value


def from_dict(model, data: dict):
    """Build a model dataclass from a decoded JSON mapping."""

    if not isinstance(data, dict):
        raise DecodeError(
            f"expected a JSON object for {model.__name__} but got {type(data).__name__}"
        )

    hints = get_type_hints(model)
    kwargs = {}
    for model_field in dataclasses.fields(model):
        if model_field.name in data:
            kwargs[model_field.name] = _convert(
                hints[model_field.name], data[model_field.name]
            )

    return model(**kwargs)


def decode(body: bytes, model):
    """
    Decode a raw response body into model, which is either a model dataclass or
    list[Model]. Raises DecodeError if the body is not valid JSON or has the wrong shape.
    """

    try:
        data = json.loads(body)
    except (ValueError, TypeError) as error:
        raise DecodeError(f"error parsing json to {_name(model)}: {error}")

    try:
        return _convert(model, data)
    except DecodeError as error:
        raise DecodeError(f"error parsing json to {_name(model)}: {error}")


def _name(model) -> str:
    return getattr(model, "__name__", None) or str(model)
