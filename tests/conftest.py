import sys
from pathlib import Path

import pytest

# Ensure local source package (src/jira_client) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from jira_client._config import Config  # noqa: E402
from jira_client._utils.constants import (  # noqa: E402
    ENV_API_TOKEN,
    ENV_BASE_URL,
    ENV_BEARER_TOKEN,
    ENV_DEBUG,
    ENV_EMAIL,
    ENV_SESSION_COOKIE,
    ENV_TIMEOUT,
)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    for name in (
        ENV_BASE_URL,
        ENV_EMAIL,
        ENV_API_TOKEN,
        ENV_BEARER_TOKEN,
        ENV_SESSION_COOKIE,
        ENV_TIMEOUT,
        ENV_DEBUG,
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://test-site.atlassian.net"


@pytest.fixture
def email() -> str:
    return "dev@example.com"


@pytest.fixture
def api_token() -> str:
    return "test-api-token"


@pytest.fixture
def config(base_url: str, email: str, api_token: str) -> Config:
    return Config(base_url=base_url, email=email, api_token=api_token)
