from .errors import AnyConnError, DecodeError, URLParseError
from .request import DataType, RequestOptions
from .response import Result

__all__ = [
    "AnyConnError",
    "DataType",
    "DecodeError",
    "RequestOptions",
    "Result",
    "URLParseError",
]
