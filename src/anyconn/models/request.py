from enum import Enum
from typing import Any, Literal, Optional, Union

from httpx import URL
from pydantic import BaseModel, ConfigDict, Field, field_validator


class DataType(str, Enum):
    JSON = "json"
    FORM = "form"
    FORMDATA = "formdata"


class RequestOptions(BaseModel):
    """Options for a single request.

    ``data`` is only encoded when it is a mapping (or, for POST, a raw string
    sent verbatim). Any other value is ignored.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        populate_by_name=True,
    )

    url: Union[str, URL]
    method: Literal["GET", "POST"] = "GET"
    header: Optional[dict[str, Any]] = None
    data: Any = None
    data_type: DataType = Field(default=DataType.JSON, alias="dataType")

    @field_validator("method", mode="before")
    @classmethod
    def _upper_method(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.upper()
        return value
