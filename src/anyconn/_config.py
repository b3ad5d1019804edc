import os
from typing import Literal, Optional

from pydantic import BaseModel

from ._utils.constants import ENV_LOG_LEVEL, ENV_TRACE_BODY

_TRUTHY = {"1", "true", "yes", "on"}

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"]


class Config(BaseModel):
    trace_body: bool = False
    log_level: LogLevel = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None) -> "Config":
        """Build a configuration from ``ANYCONN_*`` environment variables.

        Raises:
            pydantic.ValidationError: If ``ANYCONN_LOG_LEVEL`` is not a level name.
        """
        env = os.environ if environ is None else environ
        return cls(
            trace_body=env.get(ENV_TRACE_BODY, "").strip().lower() in _TRUTHY,
            log_level=env.get(ENV_LOG_LEVEL, "WARNING").strip().upper() or "WARNING",
        )
