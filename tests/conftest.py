import sys
from pathlib import Path

import pytest

# Ensure local source package (src/anyconn) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from anyconn._config import Config  # noqa: E402
from anyconn._services.request_executor import RequestExecutor  # noqa: E402


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("ANYCONN_TRACE_BODY", raising=False)
    monkeypatch.delenv("ANYCONN_LOG_LEVEL", raising=False)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def config() -> Config:
    return Config()


@pytest.fixture
def executor(config: Config) -> RequestExecutor:
    return RequestExecutor(config=config)


@pytest.fixture
def base_url() -> str:
    return "http://test.example.com"
