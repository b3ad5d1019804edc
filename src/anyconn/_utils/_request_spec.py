from dataclasses import dataclass, field

from httpx import URL, Headers


@dataclass
class RequestSpec:
    """Encapsulates a fully prepared HTTP request.

    Holds everything that goes on the wire: the method, the final URL (with any
    injected query parameters), the merged headers and the encoded body. An
    empty ``content`` means the request carries no body.
    """

    method: str
    url: URL
    headers: Headers = field(default_factory=Headers)
    content: bytes = b""
