"""
Dynamic image resizing

Every image returned by the Unsplash API is a dynamic image URL: the image can be resized,
cropped, compressed and re-encoded client-side just by adjusting the query parameters of
photo.urls.raw, without any API call. Under the hood Unsplash uses Imgix.

https://unsplash.com/documentation#dynamically-resizable-images
"""

from dataclasses import dataclass

from unsplashed.client import build_url
from unsplashed.models import Photo


@dataclass
class ResizeOptions:
    """
    Imgix rendering parameters. Empty values are left out of the url.

    crop: https://docs.imgix.com/apis/rendering/size/crop
    image_format (fm): https://docs.imgix.com/apis/rendering/format/fm
    auto: https://docs.imgix.com/apis/rendering/auto/auto
    quality (q): compression quality for lossy formats
    fit: https://docs.imgix.com/apis/rendering/size/fit
    dpr: device pixel ratio, 1 to 5
    """

    width: str = ""
    height: str = ""
    crop: str = ""
    image_format: str = ""
    auto: str = ""
    quality: str = ""
    fit: str = ""
    dpr: str = ""

    @classmethod
    def default(cls, width: int, height: int) -> "ResizeOptions":
        return cls(width=str(width), height=str(height), auto="format")

    def as_params(self) -> dict:
        params = {
            "w": self.width,
            "h": self.height,
            "crop": self.crop,
            "fm": self.image_format,
            "auto": self.auto,
            "q": self.quality,
            "fit": self.fit,
            "dpr": self.dpr,
        }
        return {key: str(value) for key, value in params.items() if value not in ("", None)}


def resized_photo_url(photo: Photo, options: ResizeOptions) -> str:
    """Apply options to photo.urls.raw and return the resulting url."""

    return build_url(photo.urls.raw, options.as_params())
