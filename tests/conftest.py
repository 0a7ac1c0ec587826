import httpx
import pytest

from okta_request import Okta


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("OKTA_ORG", raising=False)
    monkeypatch.delenv("OKTA_API_KEY", raising=False)
    monkeypatch.delenv("OKTA_PREVIEW", raising=False)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def org() -> str:
    return "dev-123456"


@pytest.fixture
def api_key() -> str:
    return "00aTestApiKey"


@pytest.fixture
def base_url(org: str) -> str:
    return f"https://{org}.okta.com/api/v1/"


@pytest.fixture
def client(base_url: str):
    with httpx.Client(base_url=base_url) as client:
        yield client


@pytest.fixture
async def client_async(base_url: str):
    async with httpx.AsyncClient(base_url=base_url) as client:
        yield client


@pytest.fixture
def okta(org: str, api_key: str):
    with Okta(org=org, api_key=api_key) as okta:
        yield okta
