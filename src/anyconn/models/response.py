from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Result(BaseModel):
    """Outcome of a completed request.

    ``data`` is the parsed JSON value for JSON responses, a ``str`` for
    ``text/*`` responses and the raw ``bytes`` otherwise.
    """

    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(alias="statusCode")
    data: Any = None
    headers: dict[str, str] = Field(default_factory=dict)
