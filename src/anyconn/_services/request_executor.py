from collections.abc import Mapping
from logging import getLogger
from typing import Any, Optional, Union

from httpx import URL, AsyncClient, Client, Request, Response

from .._config import Config
from .._utils import (
    RequestSpec,
    decode_json,
    encode_form,
    encode_formdata,
    encode_json,
    format_headers,
    get_httpx_client_kwargs,
    handle_errors,
    make_boundary,
    parse_content_type,
    set_query_params,
)
from .._utils.constants import (
    CONTENT_TYPE_FORM,
    CONTENT_TYPE_JSON,
    CONTENT_TYPE_MULTIPART,
    HEADER_ACCEPT_ENCODING,
    HEADER_CONTENT_TYPE,
)
from ..models.errors import URLParseError
from ..models.request import DataType, RequestOptions
from ..models.response import Result

OptionsLike = Union[RequestOptions, Mapping[str, Any], str]


def to_options(options: OptionsLike) -> RequestOptions:
    """Normalize a bare URL string or a mapping of fields into ``RequestOptions``."""
    if isinstance(options, RequestOptions):
        return options
    if isinstance(options, str):
        return RequestOptions(url=options)
    return RequestOptions.model_validate(options)


def parse_url(url: Union[str, URL]) -> URL:
    if isinstance(url, URL):
        return url
    with handle_errors(url=url):
        parsed = URL(url)
    if not parsed.scheme or not parsed.host:
        raise URLParseError(url, "an absolute URL with scheme and host is required")
    return parsed


class RequestExecutor:
    """Performs one HTTP(S) request per call and decodes the response.

    Each call opens its own client and closes it before returning, so nothing
    is shared between calls. Redirects are not followed, no timeout is applied
    and failures are never retried.
    """

    def __init__(self, config: Optional[Config] = None) -> None:
        self._logger = getLogger("anyconn")
        self._config = config or Config.from_env()

    def prepare(self, options: OptionsLike) -> RequestSpec:
        """Build the wire request for ``options`` without sending it.

        Raises:
            URLParseError: If ``options.url`` is not an absolute URL.
        """
        options = to_options(options)
        url = parse_url(options.url)
        headers = format_headers(options.header)
        content = b""
        data = options.data

        if isinstance(data, Mapping):
            if options.method == "GET":
                url = set_query_params(url, data)
            elif options.method == "POST":
                descriptor = parse_content_type(
                    headers.get(HEADER_CONTENT_TYPE, CONTENT_TYPE_JSON)
                )
                self._logger.debug(f"Request content type: {descriptor}")

                if options.data_type == DataType.JSON:
                    content = encode_json(data)
                    headers[HEADER_CONTENT_TYPE] = CONTENT_TYPE_JSON
                elif options.data_type == DataType.FORM:
                    content = encode_form(data)
                    headers[HEADER_CONTENT_TYPE] = CONTENT_TYPE_FORM
                elif options.data_type == DataType.FORMDATA:
                    boundary = make_boundary()
                    content = encode_formdata(data, boundary)
                    headers[HEADER_CONTENT_TYPE] = (
                        f"{CONTENT_TYPE_MULTIPART}; boundary={boundary}"
                    )
                    if self._config.trace_body:
                        self._logger.debug(f"Multipart body: {content!r}")
        elif isinstance(data, str) and options.method == "POST":
            content = data.encode("utf-8")

        return RequestSpec(
            method=options.method, url=url, headers=headers, content=content
        )

    async def execute(self, options: OptionsLike) -> Result:
        """Send the request and return the decoded result.

        Transport errors (``httpx.TransportError`` subclasses) propagate
        unchanged, including failures while reading the body.

        Raises:
            URLParseError: If the URL is malformed; raised before any I/O.
            DecodeError: If a JSON response body does not parse.
        """
        spec = self.prepare(options)
        self._log_request(spec)

        async with AsyncClient(**get_httpx_client_kwargs(spec.url)) as client:
            request = self._build_request(client, spec)
            response = await client.send(request, stream=True)
            try:
                chunks = [chunk async for chunk in response.aiter_raw()]
            finally:
                await response.aclose()

        return self._to_result(response, b"".join(chunks))

    def execute_sync(self, options: OptionsLike) -> Result:
        """Blocking counterpart of :meth:`execute` with the same contract."""
        spec = self.prepare(options)
        self._log_request(spec)

        with Client(**get_httpx_client_kwargs(spec.url)) as client:
            request = self._build_request(client, spec)
            response = client.send(request, stream=True)
            try:
                chunks = list(response.iter_raw())
            finally:
                response.close()

        return self._to_result(response, b"".join(chunks))

    def _build_request(
        self, client: Union[Client, AsyncClient], spec: RequestSpec
    ) -> Request:
        request = client.build_request(
            spec.method,
            spec.url,
            headers=spec.headers,
            content=spec.content or None,
        )
        # httpx always advertises compression; only the merged headers go out.
        request.headers.pop(HEADER_ACCEPT_ENCODING, None)
        return request

    def _log_request(self, spec: RequestSpec) -> None:
        self._logger.debug(f"Request: {spec.method} {spec.url}")
        self._logger.debug(f"HEADERS: {dict(spec.headers)}")

    def _to_result(self, response: Response, body: bytes) -> Result:
        content_type = response.headers.get(HEADER_CONTENT_TYPE)
        descriptor = parse_content_type(content_type)
        self._logger.debug(
            f"Response: {response.status_code} {descriptor} ({len(body)} bytes)"
        )

        data: Any
        with handle_errors(content_type=content_type):
            if descriptor.is_json:
                data = decode_json(body.decode(descriptor.charset, errors="replace"))
            elif descriptor.is_text:
                data = body.decode(descriptor.charset, errors="replace")
            else:
                data = body

        return Result(
            status_code=response.status_code or 0,
            data=data,
            headers=dict(response.headers.items()),
        )


async def request(options: OptionsLike) -> Result:
    """Perform a single request.

    Args:
        options: A URL string, a ``RequestOptions`` or a mapping of its fields.

    Examples:
        >>> result = await request("https://example.com/api")
        >>> result = await request(
        ...     {"url": "https://example.com/api", "method": "POST",
        ...      "data": {"a": 1}, "dataType": "form"}
        ... )
    """
    return await RequestExecutor().execute(options)


def request_sync(options: OptionsLike) -> Result:
    """Blocking counterpart of :func:`request`."""
    return RequestExecutor().execute_sync(options)
