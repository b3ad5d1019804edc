"""Minimal HTTP(S) request helper.

Performs one request per call, encodes ``data`` as JSON, URL-encoded form or
multipart form fields, and decodes the response by its ``content-type``.

Example:
    >>> import anyconn
    >>> result = await anyconn.request("https://example.com/api/items")
    >>> result.status_code, result.data
"""

from ._config import Config
from ._services import RequestExecutor, request, request_sync
from ._utils import ContentTypeDescriptor, RequestSpec, parse_content_type
from .models import (
    AnyConnError,
    DataType,
    DecodeError,
    RequestOptions,
    Result,
    URLParseError,
)

__all__ = [
    "AnyConnError",
    "Config",
    "ContentTypeDescriptor",
    "DataType",
    "DecodeError",
    "RequestExecutor",
    "RequestOptions",
    "RequestSpec",
    "Result",
    "URLParseError",
    "parse_content_type",
    "request",
    "request_sync",
]
