"""
unsplashed Configuration Management

This file handles the settings a Client is constructed with and the credentials used
to talk to the Unsplash API. An UnsplashConfig is built once per Client instance and
replaces any kind of process-wide endpoint table, so that tests can point a client at
a mock host by passing a different api_base.

Settings may be persisted as "config.json". For Ubuntu (current development target)
this is saved at ~/.config/unsplashed/config.json, or in the directory named by the
UNSPLASHED_CONFIG_DIR environment variable. Credentials are never written to the
config file; they are read from the environment (optionally populated from a .env
file by python-dotenv). Raise an UnsplashConfigError for any issues that arise in
processing or retrieving these values.
"""

import json
import os
from dataclasses import dataclass
from dataclasses import asdict
from dataclasses import field
from pathlib import Path, PurePath
from typing import Optional
from urllib.parse import quote

from dotenv import load_dotenv

from unsplashed.errors import UnsplashConfigError

DEFAULT_CONFIG_DIR = Path("~/.config/unsplashed")


class PathEncoder(json.JSONEncoder):
    """
    custom encoder adds support for serializing pathlib objects as strings
    """

    def default(self, o):
        if isinstance(o, PurePath):
            return str(o)

        else:
            return json.JSONEncoder.default(self, o)


@dataclass
class UnsplashConfig:
    """
    Settings for a single Client. The pattern applied is to instantiate an UnsplashConfig by
    supplying keyword arguments from a deserialized json object, so application code never
    touches brittle dictionary keys. headers is owned by the Client built from this config
    and is not persisted.

    auth_in_header: if True a public client sends "Authorization: Client-ID <id>",
    otherwise the client id is passed as the client_id query parameter.
    timeout: default requests timeout (seconds) used when a call does not pass its own.
    """

    api_base: str = "https://api.unsplash.com"
    oauth_base: str = "https://unsplash.com/oauth"
    api_version: str = "v1"
    auth_in_header: bool = True
    timeout: Optional[float] = None
    download_dir: Path = Path("~/unsplashed").expanduser()
    headers: dict = field(default_factory=dict, repr=False, compare=False)

    def __post_init__(self):
        """
        Handle the case where a new UnsplashConfig is created from JSON, which cannot
        deserialize a str into a Path.
        """

        self.download_dir = Path(self.download_dir).expanduser()
        self.headers = dict(self.headers)
        self.headers.setdefault("Accept-Version", self.api_version)

    def endpoint(self, *parts) -> str:
        """Join path components onto the api base, e.g. endpoint("photos", id, "like")."""

        path = "/".join(quote(str(part), safe="") for part in parts)
        return f"{self.api_base.rstrip('/')}/{path}"

    @property
    def authorize_endpoint(self) -> str:
        return f"{self.oauth_base.rstrip('/')}/authorize"

    @property
    def token_endpoint(self) -> str:
        return f"{self.oauth_base.rstrip('/')}/token"

    def copy(self, headers: dict = None) -> "UnsplashConfig":
        """Return an independent config, optionally with extra headers merged in."""

        merged = dict(self.headers)
        merged.update(headers or {})
        settings = {key: value for key, value in asdict(self).items() if key != "headers"}
        return UnsplashConfig(headers=merged, **settings)

    def generate_config_json(self, config_dir: Path = None) -> Path:
        """
        Write the UnsplashConfig to file, serializing to JSON. Returns filepath of written
        config.json file.

        Warning: will overwrite any existing config file.
        """

        config_dir = Path(config_dir) if config_dir else get_config_dir()
        settings = {key: value for key, value in asdict(self).items() if key != "headers"}

        try:
            to_json = json.dumps(settings, sort_keys=True, indent=4, cls=PathEncoder)

        except TypeError as error:
            raise UnsplashConfigError(
                f"There was an error trying to serialize config data to JSON: {error}"
            )

        try:
            config_dir.mkdir(parents=True, exist_ok=True)
            dest_file = config_dir / "config.json"
            with open(dest_file, "w") as file:
                file.write(to_json)

        except OSError as error:
            raise UnsplashConfigError(
                f"There was an error saving the configuration file: {error}."
            )

        return dest_file


@dataclass(frozen=True)
class Credentials:
    """Application credentials issued on the Unsplash developer dashboard."""

    client_id: str
    client_secret: str = ""
    redirect_uri: str = "urn:ietf:wg:oauth:2.0:oob"


def get_config_dir() -> Path:
    """Directory holding config.json, from UNSPLASHED_CONFIG_DIR or the default."""

    try:
        return Path(os.environ["UNSPLASHED_CONFIG_DIR"]).expanduser()

    except KeyError:
        return DEFAULT_CONFIG_DIR.expanduser()


def load_config() -> UnsplashConfig:
    """
    Load config.json from the config directory and instantiate it as an UnsplashConfig.
    Raise UnsplashConfigError if a config file can't be found or read at that location.
    """

    config_src = get_config_dir() / "config.json"

    try:
        with config_src.open("r") as file:
            from_json = json.loads(file.read())
            config = UnsplashConfig(**from_json)

    except json.JSONDecodeError as error:
        raise UnsplashConfigError(f"There was an issue reading the config: {error}")

    except FileNotFoundError as error:
        raise UnsplashConfigError(f"There was an issue opening the config: {error}")

    except TypeError as error:
        raise UnsplashConfigError(f"Unknown setting in the config: {error}")

    return config


def init() -> UnsplashConfig:
    """Load the saved config, or write out and return the defaults if there is none."""

    try:
        config = load_config()

    except UnsplashConfigError:
        config = UnsplashConfig()
        config.generate_config_json()

    return config


def load_credentials() -> Credentials:
    """
    Read application credentials from the environment. A .env file in the working directory
    (or any parent) is loaded first, without overriding variables that are already set.
    """

    load_dotenv()

    client_id = os.environ.get("UNSPLASH_CLIENT_ID", "").strip()
    if not client_id:
        raise UnsplashConfigError(
            "UNSPLASH_CLIENT_ID is not set. Add it to your environment or a .env file."
        )

    redirect_uri = os.environ.get("UNSPLASH_REDIRECT_URI", "").strip()

    return Credentials(
        client_id=client_id,
        client_secret=os.environ.get("UNSPLASH_CLIENT_SECRET", "").strip(),
        redirect_uri=redirect_uri or Credentials.redirect_uri,
    )
