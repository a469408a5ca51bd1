"""
Pagination

List endpoints return one page at a time. pages() walks them lazily:

    for photos in pages(unsplash.photos.all, {"order_by": "latest"}, limit=5):
        ...
"""

from collections.abc import Callable, Generator


def pages(
    fetch: Callable[[dict], list],
    query_params: dict = None,
    start: int = 1,
    limit: int = None,
) -> Generator[list, None, None]:
    """
    Call fetch with page=start, start+1, ... and yield each page. Stops at the first empty
    page or after limit pages. query_params is not modified.
    """

    page = start
    fetched = 0

    while limit is None or fetched < limit:
        params = dict(query_params or {})
        params["page"] = str(page)

        results = fetch(params)
        if not results:
            return

        yield results

        fetched += 1
        page += 1
