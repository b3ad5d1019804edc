import re
from dataclasses import dataclass
from typing import Any

from .constants import DEFAULT_CHARSET

_PARAM_SEPARATOR = re.compile(r";\s*")
_MEDIA_SEPARATOR = re.compile(r"/+")
_CHARSET_PARAM = re.compile(r"^charset=(.+)$")


@dataclass(frozen=True)
class ContentTypeDescriptor:
    type: str = "text"
    format: str = "plain"
    charset: str = DEFAULT_CHARSET

    @property
    def is_json(self) -> bool:
        return self.format == "json"

    @property
    def is_text(self) -> bool:
        return self.type == "text"


def parse_content_type(value: Any) -> ContentTypeDescriptor:
    """Parse a ``content-type`` header value into its type, format and charset.

    Anything that is not a non-empty string yields ``text/plain; charset=utf-8``.

    Examples:
        >>> parse_content_type("application/json; charset=UTF-8")
        ContentTypeDescriptor(type='application', format='json', charset='utf-8')
        >>> parse_content_type(None)
        ContentTypeDescriptor(type='text', format='plain', charset='utf-8')
    """
    if not value or not isinstance(value, str):
        return ContentTypeDescriptor()

    media, *params = _PARAM_SEPARATOR.split(value.strip().lower())

    charset = DEFAULT_CHARSET
    for param in params:
        match = _CHARSET_PARAM.match(param.strip())
        if match:
            charset = match.group(1).strip().strip('"') or DEFAULT_CHARSET
            break

    parts = _MEDIA_SEPARATOR.split(media.strip(), maxsplit=1)
    media_type = parts[0]
    media_format = parts[1] if len(parts) > 1 else ""
    return ContentTypeDescriptor(type=media_type, format=media_format, charset=charset)
