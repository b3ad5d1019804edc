class AnyConnError(Exception):
    """Base class for errors raised by anyconn."""


class URLParseError(AnyConnError, ValueError):
    """Raised when the request URL cannot be parsed into an absolute URL."""

    def __init__(self, url: object, reason: str = "") -> None:
        self.url = url
        message = f"Invalid URL {url!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class DecodeError(AnyConnError, ValueError):
    """Raised when a response body cannot be decoded.

    Covers bodies advertised as JSON that fail to parse and responses that name
    a charset Python has no codec for. The original parser or codec error is
    available as ``__cause__``.
    """

    def __init__(self, message: str, content_type: str | None = None) -> None:
        self.content_type = content_type
        super().__init__(message)
