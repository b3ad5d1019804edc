import os
import ssl
from typing import Any, Optional

from httpx import URL

# Checked in order when the system trust store is unavailable.
_CA_FILE_VARS = ("SSL_CERT_FILE", "REQUESTS_CA_BUNDLE")
_CA_DIR_VAR = "SSL_CERT_DIR"


def _env_path(name: str) -> Optional[str]:
    value = os.environ.get(name)
    if not value:
        return None
    return os.path.expanduser(os.path.expandvars(value))


def create_tls_context() -> ssl.SSLContext:
    """TLS context for ``https`` requests.

    Uses the operating system trust store through ``truststore``; without it,
    falls back to a CA bundle from the environment or ``certifi``.
    """
    try:
        import truststore

        return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    except ImportError:
        import certifi

        cafile = next(
            (path for path in map(_env_path, _CA_FILE_VARS) if path), None
        )
        return ssl.create_default_context(
            cafile=cafile or certifi.where(), capath=_env_path(_CA_DIR_VAR)
        )


def get_httpx_client_kwargs(url: URL) -> dict[str, Any]:
    """Client settings for a single request to ``url``.

    Only ``https`` URLs get a TLS context. Redirects are never followed and no
    timeout is applied; callers needing a deadline wrap the call themselves.
    """
    kwargs: dict[str, Any] = {
        "follow_redirects": False,
        "timeout": None,
    }
    if url.scheme == "https":
        kwargs["verify"] = create_tls_context()
    return kwargs
