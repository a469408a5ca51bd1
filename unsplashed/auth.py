"""
Unsplash OAuth2 - Authorization Code Flow

Private actions (liking photos, managing collections, reading the current user's profile)
need a bearer token obtained through the three-legged OAuth2 authorization-code grant.
The steps are:

    1) build the authorize url for the requested scopes and send the user there
    2) the user approves and is redirected to redirect_uri with a `code` query parameter
    3) exchange the code (plus client id/secret) for an access token
    4) build a private Client that sends "Authorization: Bearer <token>"

AuthorizationFlow walks these steps in order. The flow is linear: if any step fails the
flow is over and must be restarted from request_authorization(). There are no retries.
private_client() runs the whole flow in one call and is what most callers want:

    client = private_client(
        client_id, client_secret, redirect_uri, scopes=[scopes.WRITE_LIKES]
    )

See https://unsplash.com/documentation/user-authentication-workflow
"""

import logging
from enum import Enum
from functools import wraps
from urllib.parse import urlsplit, parse_qs, urlencode

import requests
from rich.console import Console

from unsplashed.client import Client
from unsplashed.client import send_request
from unsplashed.config import UnsplashConfig
from unsplashed.errors import AuthCodeEmpty
from unsplashed.errors import AuthFlowError
from unsplashed.errors import CodeParamMissing
from unsplashed.models import AuthResponse
from unsplashed.models import decode
from unsplashed.scopes import AuthScopes

logger = logging.getLogger(__name__)


def authorize_url(
    client_id: str, redirect_uri: str, scopes=(), config: UnsplashConfig = None
) -> str:
    """
    Build the url the resource owner visits to grant access. "public" is always requested
    first, e.g. scopes ["write_likes"] produces scope=public+write_likes.
    """

    config = config if config is not None else UnsplashConfig()
    query = {
        "client_id": client_id,
        "redirect_uri": redirect_uri,
        "response_type": "code",  # the only response type Unsplash supports
        "scope": AuthScopes.from_iterable(scopes).as_param(),
    }

    return f"{config.authorize_endpoint}?{urlencode(query)}"


def prompt_for_code(url: str, console: Console = None) -> str:
    """
    Show the authorize url to the operator and block until they paste the authorization
    code from the redirect. Returns the code with surrounding whitespace removed.
    """

    console = console if console is not None else Console(stderr=True)
    console.print(f"Navigate to:\n{url}\n", soft_wrap=True)
    console.print(
        "You will be redirected to the redirect uri, whose link will have a `code` query parameter."
    )

    return console.input("Paste the authorization code here: ").strip()


def code_from_redirect(redirect_url: str) -> str:
    """Pull the authorization code out of the url the user was redirected to."""

    codes = parse_qs(urlsplit(redirect_url).query).get("code")
    if not codes or not codes[0].strip():
        raise CodeParamMissing(redirect_url)

    return codes[0].strip()


def capture_code(
    url: str, session: requests.Session = None, timeout=None
) -> str:
    """
    Non-interactive variant: request the authorize url and read the code from the url the
    request ended up at. requests follows redirects on our behalf and response.url is the
    last effective url in the redirect sequence. The status is not checked: the redirect
    target often answers with an error page while its url still carries the code.
    """

    session = session if session is not None else requests.Session()
    response = session.get(url, timeout=timeout)

    return code_from_redirect(response.url)


def exchange_code_for_token(
    client_id: str,
    client_secret: str,
    redirect_uri: str,
    code: str,
    session: requests.Session = None,
    config: UnsplashConfig = None,
    timeout=None,
) -> AuthResponse:
    """
    Exchange an authorization code for an access token. A blank code fails with
    AuthCodeEmpty before any request is made. A non-success status raises StatusCodeError
    carrying the reasons from the response body.
    """

    if code is None or not code.strip():
        raise AuthCodeEmpty()

    config = config if config is not None else UnsplashConfig()
    session = session if session is not None else requests.Session()

    payload = {
        "client_id": client_id,
        "client_secret": client_secret,
        "redirect_uri": redirect_uri,
        "code": code.strip(),
        "grant_type": "authorization_code",
    }
    response = send_request(
        session,
        "POST",
        config.token_endpoint,
        headers={"Accept-Version": config.api_version},
        body=payload,
        timeout=timeout if timeout is not None else config.timeout,
    )

    return decode(response.content, AuthResponse)


def finalize_client(
    client_id: str,
    access_token: str,
    scopes=(),
    session: requests.Session = None,
    config: UnsplashConfig = None,
) -> Client:
    """
    Return a new private Client that authenticates with the bearer token and holds the
    granted scopes. This is the only kind of client allowed to make scope-gated calls.
    """

    config = config if config is not None else UnsplashConfig()
    headers = {
        "Authorization": f"Bearer {access_token}",
        "Accept-Version": config.api_version,
    }

    return Client(
        client_id,
        session=session,
        config=config,
        private=True,
        auth_scopes=AuthScopes.from_iterable(scopes),
        headers=headers,
    )


class FlowState(Enum):
    UNAUTHENTICATED = "unauthenticated"
    AUTHORIZATION_REQUESTED = "authorization_requested"
    CODE_OBTAINED = "code_obtained"
    TOKEN_EXCHANGED = "token_exchanged"
    PRIVATE_CLIENT_READY = "private_client_ready"
    FAILED = "failed"


def step(expected: FlowState, reached: FlowState):
    """
    Decorator for AuthorizationFlow steps. Refuse to run unless the flow is in the expected
    state, advance to the reached state on success and mark the flow FAILED on any error.
    """

    def wrapper(func):
        @wraps(func)
        def inner(self, *args, **kwargs):
            if self.state is not expected:
                raise AuthFlowError(
                    f"cannot run '{func.__name__}' while flow is {self.state.value}, "
                    f"expected {expected.value}"
                )
            try:
                result = func(self, *args, **kwargs)
            except Exception:
                self.state = FlowState.FAILED
                raise

            self.state = reached
            logger.debug("authorization flow reached %s", reached.value)
            return result

        return inner

    return wrapper


class AuthorizationFlow:
    """
    Drives the authorization-code grant for one set of credentials, one step at a time.

        flow = AuthorizationFlow(client_id, client_secret, redirect_uri, ["write_likes"])
        url = flow.request_authorization()
        flow.obtain_code(prompt_for_code)
        flow.exchange_code()
        client = flow.finalize()
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        scopes=(),
        session: requests.Session = None,
        config: UnsplashConfig = None,
        timeout=None,
    ):
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.scopes = AuthScopes.from_iterable(scopes)
        self.session = session if session is not None else requests.Session()
        self.config = config if config is not None else UnsplashConfig()
        self.timeout = timeout

        self.state = FlowState.UNAUTHENTICATED
        self.url = None
        self.code = None
        self.auth_response = None

    def request_authorization(self) -> str:
        """Start (or restart) the flow. Returns the authorize url."""

        self.code = None
        self.auth_response = None
        self.url = authorize_url(
            self.client_id, self.redirect_uri, self.scopes, config=self.config
        )
        self.state = FlowState.AUTHORIZATION_REQUESTED
        return self.url

    @step(FlowState.AUTHORIZATION_REQUESTED, FlowState.CODE_OBTAINED)
    def obtain_code(self, obtain=prompt_for_code) -> str:
        """
        Get the authorization code. obtain is called with the authorize url and returns the
        code, e.g. prompt_for_code (interactive) or a redirect capture.
        """

        code = obtain(self.url)
        if code is None or not code.strip():
            raise AuthCodeEmpty()

        self.code = code.strip()
        return self.code

    @step(FlowState.CODE_OBTAINED, FlowState.TOKEN_EXCHANGED)
    def exchange_code(self) -> AuthResponse:
        self.auth_response = exchange_code_for_token(
            self.client_id,
            self.client_secret,
            self.redirect_uri,
            self.code,
            session=self.session,
            config=self.config,
            timeout=self.timeout,
        )
        return self.auth_response

    @step(FlowState.TOKEN_EXCHANGED, FlowState.PRIVATE_CLIENT_READY)
    def finalize(self) -> Client:
        """Build the private client. The token response is dropped once it is used."""

        access_token = self.auth_response.access_token
        self.auth_response = None

        return finalize_client(
            self.client_id,
            access_token,
            self.scopes,
            session=self.session,
            config=self.config,
        )


def private_client(
    client_id: str,
    client_secret: str,
    redirect_uri: str,
    scopes=(),
    obtain_code=prompt_for_code,
    session: requests.Session = None,
    config: UnsplashConfig = None,
    timeout=None,
) -> Client:
    """Run the complete authorization flow and return a private Client."""

    flow = AuthorizationFlow(
        client_id,
        client_secret,
        redirect_uri,
        scopes,
        session=session,
        config=config,
        timeout=timeout,
    )
    flow.request_authorization()
    flow.obtain_code(obtain_code)
    flow.exchange_code()

    return flow.finalize()
