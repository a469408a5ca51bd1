"""
Image Handler

Utilities for downloading photo files once the API has told us where they live. The
download itself is API agnostic: it takes a url and fetches the image bytes with no
Unsplash authentication attached, since image urls are served from the public CDN.
Recording the download with the API (required by the API guidelines) is done by
PhotosService.download before this is called.
"""

import io
import logging
from pathlib import Path
from urllib.parse import urlparse

import requests
from PIL import Image, UnidentifiedImageError

from unsplashed.errors import ImageDownloadError

logger = logging.getLogger(__name__)


def validate_image(input) -> str:
    """
    Determine whether input is a valid image and return its format. PIL open accepts a Path
    object, string, or file object. It reads the content header to determine the file type
    without loading the image data.
    """

    try:
        with Image.open(input) as image:
            return image.format

    except UnidentifiedImageError:
        raise ImageDownloadError(f"Input {str(input)} does not appear to be an image.")

    except FileNotFoundError:
        raise ImageDownloadError(f"Input {str(input)} could not be found.")


def download_image(
    url: str, file_path, session: requests.Session = None, timeout=None
) -> Path:
    """
    Download the image at url and save it at file_path, creating parent directories as
    needed. Returns the location on the filesystem where the image was saved.

    An existing file is never overwritten. If the request was redirected, the file is
    named after the final url. A missing suffix is filled in from the image format.
    """

    destination_path = Path(file_path).expanduser().resolve()

    if not destination_path.exists():
        destination_path.parent.mkdir(parents=True, exist_ok=True)

    # edge case where destination path is a folder
    elif destination_path.is_dir():
        raise ImageDownloadError(f"Destination file {destination_path} is a directory.")

    else:
        raise ImageDownloadError(f"File already exists at {destination_path}.")

    session = session if session is not None else requests.Session()

    # requests follows redirects (3XX) by default; r.url is the last effective url.
    try:
        r = session.get(url, timeout=timeout)

    except requests.exceptions.RequestException as error:
        raise ImageDownloadError(str(error))

    try:
        r.raise_for_status()
    except requests.exceptions.HTTPError:
        raise ImageDownloadError(
            f"Download error: something went wrong trying to access {url} (status code {r.status_code})"
        )

    try:
        image_format = validate_image(io.BytesIO(r.content))
    except ImageDownloadError:
        raise ImageDownloadError(
            f"Download error: the target resource at {url} does not appear to be an image."
        )

    if r.url and url != r.url:
        redirected_name = Path(urlparse(r.url).path).name
        if redirected_name:
            destination_path = destination_path.parent / redirected_name

    if destination_path.suffix == "":
        destination_path = Path(f"{destination_path}.{image_format.lower()}")

    if destination_path.exists():
        raise ImageDownloadError(f"File already exists at {destination_path}.")

    # stored exactly as served, never re-encoded
    destination_path.write_bytes(r.content)

    logger.debug("saved %s to %s", url, destination_path)
    return destination_path
