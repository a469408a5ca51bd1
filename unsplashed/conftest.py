"""
conftest.py

Test configuration for unsplashed tests.

Defines Pytest fixtures for supplying test data to tests across the entire test suite.
Fixtures used within only a single module are defined directly in that module.

No test talks to the network. The transport handed to a Client is a MagicMock spec'd on
requests.Session, so every test can both script the responses (real requests.Response
objects) and check which requests were issued, or that none were.
"""

import io
import json
import unittest.mock

import pytest
import requests
from PIL import Image

from unsplashed import scopes
from unsplashed.auth import finalize_client
from unsplashed.client import Client
from unsplashed.config import UnsplashConfig


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep config files and credentials of the machine running the tests out of the way."""

    monkeypatch.setenv("UNSPLASHED_CONFIG_DIR", str(tmp_path / "config"))
    for name in ("UNSPLASH_CLIENT_ID", "UNSPLASH_CLIENT_SECRET", "UNSPLASH_REDIRECT_URI"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_response():
    """
    Return a factory for real requests.Response objects. body may be bytes or anything
    json serializable; None means an empty body.
    """

    def factory(status_code=200, body=None, url="https://api.unsplash.com/"):
        response = requests.Response()
        response.status_code = status_code
        response.url = url
        response.encoding = "utf-8"

        if body is None:
            response._content = b""
        elif isinstance(body, bytes):
            response._content = body
        else:
            response._content = json.dumps(body).encode("utf-8")

        return response

    return factory


@pytest.fixture
def session(make_response):
    """Spy transport. Answers every request with an empty 200 unless reconfigured."""

    mock_session = unittest.mock.MagicMock(spec=requests.Session)
    mock_session.request.return_value = make_response(200, {})
    return mock_session


@pytest.fixture
def config() -> UnsplashConfig:
    return UnsplashConfig(api_base="https://api.test", oauth_base="https://auth.test/oauth")


@pytest.fixture
def public_client(session, config) -> Client:
    return Client("test-client-id", session=session, config=config)


@pytest.fixture
def private_client(session, config) -> Client:
    """Private client granted every scope."""

    return finalize_client(
        "test-client-id", "test-token", scopes.ALL_SCOPES, session=session, config=config
    )


@pytest.fixture
def photo_json() -> dict:
    return {
        "id": "bLqKgljgpf4",
        "width": 1308,
        "height": 768,
        "likes": 799,
        "downloads": 400,
        "alt_description": "a mountain lake",
        "urls": {
            "raw": "https://images.unsplash.com/photo-1?ixid=abc",
            "regular": "https://images.unsplash.com/photo-1?w=1080",
        },
        "links": {
            "download_location": "https://api.test/photos/bLqKgljgpf4/download?ixid=abc"
        },
        "user": {"id": "u1", "username": "timmy", "name": "Timmy"},
        "tags": [{"title": "lake"}, {"title": "mountain"}],
        "not_a_model_field": True,
    }


@pytest.fixture
def image_bytes() -> bytes:
    """A small in-memory JPEG."""

    buffer = io.BytesIO()
    Image.new("RGB", (8, 8), color="teal").save(buffer, format="JPEG")
    return buffer.getvalue()
