# Headers
HEADER_ACCEPT = "accept"
HEADER_CONNECTION = "connection"
HEADER_CONTENT_TYPE = "content-type"
HEADER_USER_AGENT = "user-agent"
HEADER_ACCEPT_ENCODING = "accept-encoding"

# Sent on every request; caller headers take precedence.
DEFAULT_HEADERS = {
    HEADER_ACCEPT: "*/*",
    HEADER_CONNECTION: "keep-alive",
}

# Always applied last, caller headers cannot override these.
STATIC_HEADERS = {
    HEADER_USER_AGENT: "AnyConn/0.0.1",
}

# Content types
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_FORM = "application/x-www-form-urlencoded"
CONTENT_TYPE_MULTIPART = "multipart/form-data"

DEFAULT_CHARSET = "utf-8"

BOUNDARY_PREFIX = "AnyConn"

# Env vars
ENV_TRACE_BODY = "ANYCONN_TRACE_BODY"
ENV_LOG_LEVEL = "ANYCONN_LOG_LEVEL"
DOTENV_FILE = ".env"
