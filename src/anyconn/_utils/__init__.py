from ._content_type import ContentTypeDescriptor, parse_content_type
from ._encoders import (
    decode_json,
    encode_form,
    encode_formdata,
    encode_json,
    format_headers,
    make_boundary,
    set_query_params,
    stringify,
)
from ._errors import handle_errors
from ._request_spec import RequestSpec
from ._ssl_context import get_httpx_client_kwargs

__all__ = [
    "ContentTypeDescriptor",
    "RequestSpec",
    "decode_json",
    "encode_form",
    "encode_formdata",
    "encode_json",
    "format_headers",
    "get_httpx_client_kwargs",
    "handle_errors",
    "make_boundary",
    "parse_content_type",
    "set_query_params",
    "stringify",
]
