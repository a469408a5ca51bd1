"""
Unsplash

Facade wrapping the whole API. Each resource is reached through its service:

    unsplash = Unsplash(Client("my-access-key"))
    photo = unsplash.photos.get("bLqKgljgpf4")
    results = unsplash.search.photos({"query": "mountains", "per_page": "5"})
"""

from unsplashed.client import Client
from unsplashed.collections import CollectionsService
from unsplashed.photos import PhotosService
from unsplashed.search import SearchService
from unsplashed.stats import StatsService
from unsplashed.topics import TopicsService
from unsplashed.users import UsersService


class Unsplash:
    def __init__(self, client: Client):
        self.client = client
        self.users = UsersService(client)
        self.photos = PhotosService(client)
        self.collections = CollectionsService(client)
        self.topics = TopicsService(client)
        self.search = SearchService(client)
        self.stats = StatsService(client)

    def __repr__(self):
        return f"<Unsplash {self.client!r}>"
