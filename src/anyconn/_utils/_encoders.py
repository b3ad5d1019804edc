import json
import math
import random
import time
from collections.abc import Mapping
from decimal import Decimal
from typing import Any
from urllib.parse import quote

from httpx import URL, Headers

from .constants import BOUNDARY_PREFIX, DEFAULT_HEADERS, STATIC_HEADERS

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"

# Characters left alone by JavaScript's encodeURIComponent, besides alphanumerics.
_URI_COMPONENT_SAFE = "-_.!~*'()"

# Enough base-36 digits to cover a double's 52-bit mantissa.
_FRACTION_DIGITS = 11


def _format_float(value: float) -> str:
    # Number.prototype.toString: positional within [1e-6, 1e21), exponent outside
    magnitude = abs(value)
    if magnitude != 0 and (magnitude < 1e-6 or magnitude >= 1e21):
        mantissa, _, exponent = repr(value).partition("e")
        sign = "-" if exponent.startswith("-") else "+"
        return f"{mantissa}e{sign}{int(exponent.lstrip('+-'))}"
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def stringify(value: Any) -> str:
    """Render a scalar the way it appears on the wire.

    Booleans are lower-case, floats follow JavaScript number formatting
    (``1.0 -> "1"``, ``1e21 -> "1e+21"``) and ``None`` renders as ``null``.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return _format_float(value)
    return str(value)


def format_headers(header: Any) -> Headers:
    """Merge default, caller and static headers.

    Caller entries whose value is ``None`` are dropped. Static headers are
    applied last so they always win.
    """
    headers = Headers(DEFAULT_HEADERS)
    if isinstance(header, Mapping):
        for key, value in header.items():
            if value is None:
                continue
            headers[str(key)] = stringify(value)
    headers.update(STATIC_HEADERS)
    return headers


def set_query_params(url: URL, data: Mapping[str, Any]) -> URL:
    """Set each non-null field of ``data`` as a query parameter, replacing any existing value."""
    for key, value in data.items():
        if value is None:
            continue
        url = url.copy_set_param(str(key), stringify(value))
    return url


def _finite_or_null(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, Mapping):
        return {key: _finite_or_null(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite_or_null(item) for item in value]
    return value


def encode_json(data: Mapping[str, Any]) -> bytes:
    """Compact UTF-8 JSON; ``NaN`` and infinities are sent as ``null``."""
    return json.dumps(
        _finite_or_null(data),
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    ).encode("utf-8")


def _reject_constant(name: str) -> Any:
    raise json.JSONDecodeError(f"{name} is not valid JSON", name, 0)


def decode_json(text: str) -> Any:
    """Strict ``json.loads``: ``NaN``, ``Infinity`` and ``-Infinity`` are rejected."""
    return json.loads(text, parse_constant=_reject_constant)


def encode_uri_component(value: Any) -> str:
    return quote(stringify(value), safe=_URI_COMPONENT_SAFE)


def encode_form(data: Mapping[str, Any]) -> bytes:
    return "&".join(
        f"{encode_uri_component(key)}={encode_uri_component(value)}"
        for key, value in data.items()
    ).encode("utf-8")


def to_base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36[remainder])
    return "".join(reversed(digits))


def fraction_to_base36(fraction: float, max_digits: int = _FRACTION_DIGITS) -> str:
    """Base-36 digits of a fraction in ``[0, 1)``, without the ``0.`` prefix."""
    digits = []
    while fraction and len(digits) < max_digits:
        fraction *= 36
        digit = int(fraction)
        digits.append(_BASE36[digit])
        fraction -= digit
    return "".join(digits) or "0"


def make_boundary() -> str:
    """Generate a multipart boundary token.

    Not cryptographically unique; fine for plain form fields.
    """
    timestamp = to_base36(int(time.time() * 1000))
    return (
        f"{BOUNDARY_PREFIX}{timestamp}"
        f"{fraction_to_base36(random.random())}"
        f"{fraction_to_base36(random.random())}"
    )


def encode_formdata(data: Mapping[str, Any], boundary: str) -> bytes:
    # names and values are not escaped
    parts = "".join(
        f"--{boundary}\n"
        f'Content-Disposition: form-data; name="{key}"\n\n'
        f"{stringify(value)}\n"
        for key, value in data.items()
    )
    return f"{parts}--{boundary}--".encode("utf-8")
