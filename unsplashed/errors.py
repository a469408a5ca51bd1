"""
unsplashed Errors

Every error raised by the library derives from UnsplashError so that callers can catch
the whole family in one place. Errors are raised to the immediate caller and never
logged or retried inside the library. Transport failures coming from requests
(DNS, refused connections, timeouts) are not wrapped and propagate as-is.
"""


class UnsplashError(Exception):
    """Base class for all unsplashed errors."""

    pass


class UnsplashConfigError(UnsplashError):
    """Raise when an issue occurs loading configuration or credentials."""

    pass


class ClientNotPrivate(UnsplashError):
    """
    Raised when a scope-gated or private-only operation is invoked on a client that was
    not produced by the authorization flow.
    """

    def __init__(self):
        super().__init__(
            "client not private but used for functions that require private authentication"
        )


class RequiredScopeAbsent(UnsplashError):
    """Raised when a private client lacks the scope needed for a request."""

    def __init__(self, scope: str):
        self.scope = scope
        super().__init__(f"required scope `{scope}` not in client auth scopes")


class QueryParamMissing(UnsplashError):
    """Raised when a search is attempted without a `query` parameter."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"search query parameter absent in url: {url}")


class CodeParamMissing(UnsplashError):
    """Raised when an authorization redirect does not carry a `code` query parameter."""

    def __init__(self, url: str = ""):
        self.url = url
        super().__init__(f"`code` query parameter not found in the request URL {url}".rstrip())


class AuthCodeEmpty(UnsplashError):
    """Raised when the authorization code supplied by the operator is empty."""

    def __init__(self):
        super().__init__("auth code provided is empty")


class AuthFlowError(UnsplashError):
    """Raised when an authorization flow step is attempted out of order or after a failure."""

    pass


class StatusCodeError(UnsplashError):
    """
    Raised for any HTTP response outside of the success set for the request verb.
    reasons holds the messages found in the "errors" list of the response body, if any.
    """

    def __init__(self, status_code: int, reasons: list[str] = None):
        self.status_code = status_code
        self.reasons = list(reasons) if reasons else []
        super().__init__(
            f"unexpected status code: {status_code}, encountered errors: {self.reasons}"
        )


class DecodeError(UnsplashError):
    """Raised when a response body cannot be decoded into the expected structure."""

    pass


class ImageDownloadError(UnsplashError):
    """
    Raised when an image download is unsuccessful.
    """

    pass
