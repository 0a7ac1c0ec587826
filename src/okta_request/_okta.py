from logging import getLogger
from os import environ as env
from typing import Optional

from dotenv import load_dotenv
from httpx import AsyncClient, Client, Headers

from ._config import Config
from ._request import Request
from ._utils import get_httpx_client_kwargs, setup_logging
from ._utils.constants import (
    AUTH_SCHEME,
    CONTENT_TYPE_JSON,
    ENV_OKTA_API_KEY,
    ENV_OKTA_ORG,
    ENV_OKTA_PREVIEW,
    HEADER_ACCEPT,
    HEADER_AUTHORIZATION,
    HEADER_USER_AGENT,
    LOGGER_NAME,
    USER_AGENT_PREFIX,
)
from ._version import __version__
from .models.errors import ApiKeyMissingError, OrgMissingError

load_dotenv()


def _env_flag(name: str) -> bool:
    return env.get(name, "").strip().lower() in ("1", "true", "yes")


class Okta:
    """
    Entry point for the Okta API.

    Holds the configuration and the shared HTTP clients, and hands out
    ``Request`` builders bound to them. Use ``with Okta(...)`` for synchronous
    requests and ``async with Okta(...)`` once ``request_async()`` is used: only
    the async form can close the ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        *,
        org: Optional[str] = None,
        api_key: Optional[str] = None,
        preview: Optional[bool] = None,
        headers: Optional[dict[str, str]] = None,
        debug: bool = False,
    ) -> None:
        """
        Initialize the Okta client.

        Args:
            org (Optional[str]): Your organization's Okta subdomain (tenant).
                If not provided, it will be read from the `OKTA_ORG` environment variable.
            api_key (Optional[str]): Okta API token. If not provided, it will be read
                from the `OKTA_API_KEY` environment variable.
            preview (Optional[bool]): Target the oktapreview.com sandbox. If not provided,
                it will be read from the `OKTA_PREVIEW` environment variable.
            headers (Optional[dict[str, str]]): Extra headers sent with every request.
            debug (bool): Enable debug logging if set to True. Defaults to False.
        """
        org_value = org or env.get(ENV_OKTA_ORG)
        api_key_value = api_key or env.get(ENV_OKTA_API_KEY)
        preview_value = preview if preview is not None else _env_flag(ENV_OKTA_PREVIEW)

        if not org_value:
            raise OrgMissingError()
        if not api_key_value:
            raise ApiKeyMissingError()

        self._config = Config(
            org=org_value,
            api_key=api_key_value,
            preview=preview_value,
            headers=headers or {},
        )

        if debug:
            setup_logging(debug)
        self._logger = getLogger(LOGGER_NAME)
        self._logger.debug(f"Base URL: {self._config.base_url}")

        self._client: Optional[Client] = None
        self._client_async: Optional[AsyncClient] = None

    @property
    def config(self) -> Config:
        return self._config

    @property
    def default_headers(self) -> dict[str, str]:
        return {
            HEADER_ACCEPT: CONTENT_TYPE_JSON,
            HEADER_USER_AGENT: f"{USER_AGENT_PREFIX}/{__version__}",
            **self.auth_headers,
            **self._config.headers,
        }

    @property
    def auth_headers(self) -> dict[str, str]:
        return {HEADER_AUTHORIZATION: f"{AUTH_SCHEME} {self._config.api_key}"}

    def _client_kwargs(self) -> dict:
        return {
            **get_httpx_client_kwargs(),
            "base_url": self._config.base_url,
            "headers": Headers(self.default_headers),
        }

    @property
    def client(self) -> Client:
        """Shared synchronous httpx client, created on first use."""
        if self._client is None:
            self._client = Client(**self._client_kwargs())
        return self._client

    @property
    def client_async(self) -> AsyncClient:
        """Shared asynchronous httpx client, created on first use."""
        if self._client_async is None:
            self._client_async = AsyncClient(**self._client_kwargs())
        return self._client_async

    def request(self) -> Request:
        """Start a request bound to the synchronous client; finish it with ``send()``."""
        return Request(self.client)

    def request_async(self) -> Request:
        """Start a request bound to the asynchronous client; finish it with ``send_async()``."""
        return Request(self.client_async)

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    async def aclose(self) -> None:
        if self._client_async is not None:
            await self._client_async.aclose()
            self._client_async = None
        self.close()

    def __enter__(self) -> "Okta":
        return self

    def __exit__(self, *args) -> None:
        if self._client_async is not None:
            self._logger.warning(
                "Async client left open by 'with Okta(...)'; use 'async with Okta(...)' or await aclose()"
            )
        self.close()

    async def __aenter__(self) -> "Okta":
        return self

    async def __aexit__(self, *args) -> None:
        await self.aclose()
