"""
Tests for auth.py

Covers the authorization-code flow: authorize url construction, code capture from redirects
and from the operator, the token exchange and its failure modes, the private client that
comes out the other end, and the ordering rules of AuthorizationFlow.

*** Fixtures ***
- session, make_response, config (defined in conftest.py)
"""

import io
import unittest.mock
from urllib.parse import urlsplit, parse_qs

import pytest
from rich.console import Console

from unsplashed import scopes
from unsplashed.auth import AuthorizationFlow
from unsplashed.auth import FlowState
from unsplashed.auth import authorize_url
from unsplashed.auth import capture_code
from unsplashed.auth import code_from_redirect
from unsplashed.auth import exchange_code_for_token
from unsplashed.auth import finalize_client
from unsplashed.auth import private_client
from unsplashed.auth import prompt_for_code
from unsplashed.errors import AuthCodeEmpty
from unsplashed.errors import AuthFlowError
from unsplashed.errors import ClientNotPrivate
from unsplashed.errors import CodeParamMissing
from unsplashed.errors import RequiredScopeAbsent
from unsplashed.errors import StatusCodeError
from unsplashed.models import AuthResponse
from unsplashed.scopes import AuthScopes

TOKEN_JSON = {
    "access_token": "091343ce13c8ae780065ecb3b13dc903475dd22cb78a05503c2e0c69c5e98044",
    "token_type": "bearer",
    "scope": "public write_likes",
    "created_at": 1436544465,
}


"""
authorize url
"""


def test_authorize_url_prepends_public_scope(config):
    url = authorize_url("abc", "https://example.com/cb", ["write_likes"], config=config)

    assert "scope=public+write_likes" in url
    assert url.startswith("https://auth.test/oauth/authorize?")


def test_authorize_url_parameters(config):
    url = authorize_url(
        "abc", "urn:ietf:wg:oauth:2.0:oob", [scopes.READ_USER, scopes.WRITE_LIKES], config=config
    )
    query = parse_qs(urlsplit(url).query)

    assert query == {
        "client_id": ["abc"],
        "redirect_uri": ["urn:ietf:wg:oauth:2.0:oob"],
        "response_type": ["code"],
        "scope": ["public read_user write_likes"],
    }


def test_authorize_url_public_only(config):
    url = authorize_url("abc", "https://example.com/cb", config=config)

    assert "scope=public" in url
    assert "public+" not in url


def test_auth_scopes_public_first_without_duplicates():
    auth_scopes = AuthScopes("write_likes", "public", "write_likes")

    assert list(auth_scopes) == ["public", "write_likes"]
    assert str(auth_scopes) == "public+write_likes"
    assert "write_likes" in auth_scopes
    assert "write_like" not in auth_scopes


"""
obtaining the code
"""


@pytest.mark.parametrize(
    "redirect",
    [
        "https://example.com/cb?code=abc123",
        "https://example.com/cb?state=x&code=abc123",
        "https://example.com/cb?code=%20abc123%20",
    ],
)
def test_code_from_redirect(redirect):
    assert code_from_redirect(redirect) == "abc123"


@pytest.mark.parametrize(
    "redirect",
    ["https://example.com/cb", "https://example.com/cb?error=access_denied", "https://example.com/cb?code="],
)
def test_code_from_redirect_missing(redirect):
    with pytest.raises(CodeParamMissing):
        code_from_redirect(redirect)


@pytest.mark.parametrize("status", [200, 404, 500])
def test_capture_code_follows_redirect(session, make_response, status):
    """The code is read from the final url whatever the redirect target answered with."""

    session.get.return_value = make_response(
        status, b"<html></html>", url="http://localhost:8080/cb?code=xyz"
    )

    assert capture_code("https://auth.test/oauth/authorize?x=1", session=session) == "xyz"
    session.get.assert_called_once_with("https://auth.test/oauth/authorize?x=1", timeout=None)


def test_capture_code_missing(session, make_response):
    session.get.return_value = make_response(200, b"", url="https://auth.test/login")

    with pytest.raises(CodeParamMissing):
        capture_code("https://auth.test/oauth/authorize?x=1", session=session)


def test_prompt_for_code_strips_input():
    console = Console(file=io.StringIO())

    with unittest.mock.patch.object(console, "input", return_value="  abc123 \n") as mock_input:
        assert prompt_for_code("https://auth.test/oauth/authorize?x=1", console=console) == "abc123"

    mock_input.assert_called_once()
    assert "https://auth.test/oauth/authorize?x=1" in console.file.getvalue()


"""
token exchange
"""


@pytest.mark.parametrize("code", ["", "   ", None])
def test_exchange_empty_code_makes_no_request(session, config, code):
    with pytest.raises(AuthCodeEmpty):
        exchange_code_for_token("id", "secret", "uri", code, session=session, config=config)

    session.request.assert_not_called()


@pytest.mark.parametrize("status", [200, 201])
def test_exchange_success(session, make_response, config, status):
    session.request.return_value = make_response(status, TOKEN_JSON)

    auth_response = exchange_code_for_token(
        "id", "secret", "https://example.com/cb", " abc123\n", session=session, config=config
    )

    assert auth_response == AuthResponse(**TOKEN_JSON)

    args, kwargs = session.request.call_args
    assert args == ("POST", "https://auth.test/oauth/token")
    assert kwargs["json"] == {
        "client_id": "id",
        "client_secret": "secret",
        "redirect_uri": "https://example.com/cb",
        "code": "abc123",
        "grant_type": "authorization_code",
    }


def test_exchange_invalid_grant(session, make_response, config):
    session.request.return_value = make_response(401, {"errors": ["invalid_grant"]})

    with pytest.raises(StatusCodeError) as error:
        exchange_code_for_token("id", "secret", "uri", "abc", session=session, config=config)

    assert error.value.status_code == 401
    assert error.value.reasons == ["invalid_grant"]


def test_exchange_error_without_json_body(session, make_response, config):
    session.request.return_value = make_response(500, b"Internal Server Error")

    with pytest.raises(StatusCodeError) as error:
        exchange_code_for_token("id", "secret", "uri", "abc", session=session, config=config)

    assert error.value.status_code == 500
    assert error.value.reasons == []


"""
private client
"""


def test_finalize_client(session, config):
    client = finalize_client("id", "tok", ["write_likes"], session=session, config=config)

    assert client.private is True
    assert list(client.auth_scopes) == ["public", "write_likes"]
    assert client.headers["Authorization"] == "Bearer tok"
    assert client.headers["Accept-Version"] == "v1"


def test_finalize_does_not_touch_base_config(session, config):
    finalize_client("id", "tok", session=session, config=config)

    assert "Authorization" not in config.headers


"""
AuthorizationFlow
"""


@pytest.fixture
def flow(session, config):
    return AuthorizationFlow(
        "id", "secret", "https://example.com/cb", [scopes.WRITE_LIKES], session=session, config=config
    )


def test_flow_happy_path(flow, session, make_response):
    session.request.return_value = make_response(200, TOKEN_JSON)

    assert flow.state is FlowState.UNAUTHENTICATED
    url = flow.request_authorization()
    assert flow.state is FlowState.AUTHORIZATION_REQUESTED

    flow.obtain_code(lambda authorize: "abc123" if authorize == url else "")
    assert flow.state is FlowState.CODE_OBTAINED

    flow.exchange_code()
    assert flow.state is FlowState.TOKEN_EXCHANGED

    client = flow.finalize()
    assert flow.state is FlowState.PRIVATE_CLIENT_READY
    assert client.private
    assert client.headers["Authorization"] == f"Bearer {TOKEN_JSON['access_token']}"
    assert flow.auth_response is None


def test_flow_steps_out_of_order(flow):
    with pytest.raises(AuthFlowError):
        flow.obtain_code(lambda url: "abc")

    flow.request_authorization()
    with pytest.raises(AuthFlowError):
        flow.exchange_code()


def test_flow_empty_code_fails_flow(flow, session):
    flow.request_authorization()

    with pytest.raises(AuthCodeEmpty):
        flow.obtain_code(lambda url: "\n")

    assert flow.state is FlowState.FAILED
    session.request.assert_not_called()


def test_flow_failure_is_terminal_until_restart(flow, session, make_response):
    session.request.return_value = make_response(401, {"errors": ["invalid_grant"]})
    flow.request_authorization()
    flow.obtain_code(lambda url: "abc")

    with pytest.raises(StatusCodeError):
        flow.exchange_code()
    assert flow.state is FlowState.FAILED

    with pytest.raises(AuthFlowError):
        flow.finalize()
    with pytest.raises(AuthFlowError):
        flow.obtain_code(lambda url: "abc")

    # restarting from the beginning is allowed
    session.request.return_value = make_response(200, TOKEN_JSON)
    flow.request_authorization()
    flow.obtain_code(lambda url: "abc")
    flow.exchange_code()
    assert flow.finalize().private


def test_private_client_end_to_end(session, make_response, config):
    session.request.return_value = make_response(200, TOKEN_JSON)
    seen = []

    def obtain(url):
        seen.append(url)
        return "abc123"

    client = private_client(
        "id", "secret", "https://example.com/cb", [scopes.WRITE_LIKES],
        obtain_code=obtain, session=session, config=config,
    )

    assert "scope=public+write_likes" in seen[0]
    assert scopes.WRITE_LIKES in client.auth_scopes

    # granted scope passes, anything else is refused before any request
    session.request.reset_mock()
    with pytest.raises(RequiredScopeAbsent):
        client.dispatch("GET", "https://api.test/me", required_scope=scopes.READ_USER)
    session.request.assert_not_called()


def test_public_client_is_not_private(public_client):
    with pytest.raises(ClientNotPrivate):
        public_client.require_scope(scopes.PUBLIC)
