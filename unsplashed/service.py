"""
Base class for the resource services. A service holds a Client and turns method calls into
dispatch() calls plus a decode of the response body.
"""

from unsplashed.client import Client
from unsplashed.models import decode


class Service:
    def __init__(self, client: Client):
        self.client = client

    @property
    def config(self):
        return self.client.config

    def _request(
        self,
        method: str,
        endpoint: str,
        model=None,
        query_params: dict = None,
        body: dict = None,
        required_scope: str = None,
    ):
        data = self.client.dispatch(
            method,
            endpoint,
            query_params=query_params,
            body=body,
            required_scope=required_scope,
        )

        # model None means the caller does not expect a body (e.g. 204 No Content)
        if model is None:
            return None
        return decode(data, model)

    def _get(self, endpoint: str, model, query_params: dict = None):
        return self._request("GET", endpoint, model, query_params=query_params)
