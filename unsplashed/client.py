"""
Unsplash API Client

This module contains the Client and the single request path that every API call flows
through. dispatch() enforces the authentication preconditions of a call (private client,
granted scope) before any network I/O, attaches the client's credentials, issues the
request with requests and classifies the response status. Successful responses are
returned as raw bytes; decoding them into models is left to the resource services.

A public client is created directly with a client id:

    client = Client("my-access-key")

A private client (bearer token, explicit scopes) is only produced by the authorization
flow in unsplashed.auth.
"""

import logging
from types import MappingProxyType
from typing import Optional
from urllib.parse import urlsplit, urlunsplit, parse_qsl, urlencode

import requests

from unsplashed.config import UnsplashConfig
from unsplashed.errors import ClientNotPrivate
from unsplashed.errors import RequiredScopeAbsent
from unsplashed.errors import StatusCodeError
from unsplashed.scopes import AuthScopes

logger = logging.getLogger(__name__)

# status codes accepted as success for each verb. anything else is a StatusCodeError.
SUCCESS_CODES = {
    "GET": frozenset({200}),
    "POST": frozenset({200, 201}),
    "PUT": frozenset({200, 201}),
    "DELETE": frozenset({200, 204}),
}


def build_url(base: str, query_params: dict = None) -> str:
    """
    Append query_params to base as url-encoded key/value pairs. Parameters already present
    on base are kept. An empty or missing query_params returns base unmodified.
    """

    if not query_params:
        return base

    parts = urlsplit(base)
    query = parse_qsl(parts.query, keep_blank_values=True)
    query.extend((str(key), str(value)) for key, value in query_params.items())

    return urlunsplit(parts._replace(query=urlencode(query)))


def error_reasons(response: requests.Response) -> list[str]:
    """
    Best-effort extraction of the "errors" list from an error response body. Returns an
    empty list when the body is not the expected JSON.
    """

    try:
        data = response.json()
    except ValueError:
        return []

    if not isinstance(data, dict):
        return []

    errors = data.get("errors") or []
    if isinstance(errors, str):
        return [errors]
    if not isinstance(errors, list):
        return []

    return [str(error) for error in errors]


def send_request(
    session: requests.Session,
    method: str,
    url: str,
    headers: dict = None,
    body: dict = None,
    timeout=None,
) -> requests.Response:
    """
    Issue a request and classify the response against SUCCESS_CODES for the verb. Transport
    errors raised by requests propagate unchanged. timeout is passed to requests as given.
    """

    method = method.upper()
    try:
        expected = SUCCESS_CODES[method]
    except KeyError:
        raise ValueError(f"unsupported HTTP method: {method}")

    response = session.request(
        method, url, headers=headers, json=body, timeout=timeout
    )
    # path only: the query may carry client_id
    logger.debug("%s %s -> %s", method, urlsplit(url).path, response.status_code)

    if response.status_code not in expected:
        raise StatusCodeError(response.status_code, error_reasons(response))

    return response


class Client:
    """
    One configured connection to the Unsplash API.

    client_id: public application key
    session: requests.Session used as the transport (a new one is created if omitted)
    config: UnsplashConfig for this client. The client keeps its own copy, whose header
            map is written once here and treated as read-only afterward.
    private / auth_scopes: set only by unsplashed.auth.finalize_client. auth_scopes is an
            immutable AuthScopes, so the scope check in dispatch() cannot go stale between
            check and use.
    """

    def __init__(
        self,
        client_id: str,
        session: requests.Session = None,
        config: UnsplashConfig = None,
        private: bool = False,
        auth_scopes=(),
        headers: dict = None,
    ):
        self.client_id = client_id
        self.session = session if session is not None else requests.Session()
        self.private = private
        self.auth_scopes = AuthScopes.from_iterable(auth_scopes)

        extra = dict(headers or {})
        config = config if config is not None else UnsplashConfig()
        if not private and config.auth_in_header:
            extra.setdefault("Authorization", f"Client-ID {client_id}")
        self.config = config.copy(headers=extra)
        self._headers = MappingProxyType(self.config.headers)

    def __repr__(self):
        kind = "private" if self.private else "public"
        return f"<Client {kind} client_id={self.client_id!r} scopes={str(self.auth_scopes)!r}>"

    @property
    def headers(self) -> MappingProxyType:
        """Read-only view of the headers sent with every request."""

        return self._headers

    def require_scope(self, scope: str):
        """Raise unless this client is private and has been granted scope."""

        if not self.private:
            raise ClientNotPrivate()
        if scope not in self.auth_scopes:
            raise RequiredScopeAbsent(scope)

    def dispatch(
        self,
        method: str,
        endpoint: str,
        query_params: dict = None,
        body: dict = None,
        required_scope: Optional[str] = None,
        timeout=None,
    ) -> bytes:
        """
        Issue a request to endpoint and return the raw response body.

        If required_scope is given the client must be private and hold that scope;
        otherwise ClientNotPrivate or RequiredScopeAbsent is raised and no request is made.
        A non-success status raises StatusCodeError with the reasons from the body.
        """

        if required_scope:
            self.require_scope(required_scope)

        params = dict(query_params or {})
        if not self.private and not self.config.auth_in_header:
            params["client_id"] = self.client_id

        response = send_request(
            self.session,
            method,
            build_url(endpoint, params),
            headers=dict(self._headers),
            body=body,
            timeout=timeout if timeout is not None else self.config.timeout,
        )

        return response.content


def new_client(
    client_id: str, session: requests.Session = None, config: UnsplashConfig = None
) -> Client:
    """Construct a public client that authenticates with the application client id only."""

    return Client(client_id, session=session, config=config)
