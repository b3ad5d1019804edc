import json
from contextlib import contextmanager
from typing import Generator

import httpx

from ..models.errors import DecodeError, URLParseError


@contextmanager
def handle_errors(
    *, url: object = None, content_type: str | None = None
) -> Generator[None, None, None]:
    """Context manager translating parser errors into anyconn errors.

    URL parser failures become ``URLParseError`` and JSON or codec failures
    become ``DecodeError``. The original exception is chained as the cause.
    Transport errors are not touched and propagate unchanged.

    Args:
        url: The URL being parsed, used in the error message.
        content_type: The response content type, attached to decode errors.

    Raises:
        URLParseError: When ``httpx.URL`` rejects the input.
        DecodeError: When the body is not valid JSON or the charset is unknown.
    """
    try:
        yield
    except httpx.InvalidURL as e:
        raise URLParseError(url, str(e)) from e
    except json.JSONDecodeError as e:
        raise DecodeError(f"Invalid JSON response body: {e}", content_type) from e
    except LookupError as e:
        raise DecodeError(f"Unsupported response charset: {e}", content_type) from e
