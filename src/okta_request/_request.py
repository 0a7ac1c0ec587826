from logging import getLogger
from typing import Any, Mapping, Optional

from ._utils import RequestSpec, decode_body, decode_error_body
from ._utils.constants import HTTP_METHODS, LOGGER_NAME, SUCCESS_STATUS_CODES
from .models.exceptions import (
    InvalidArgumentError,
    InvalidStateError,
    OktaApiException,
    ResponseDecodeError,
)


class Request:
    """Fluent builder for a single Okta API call.

    Setters accumulate the method, endpoint and options and return the builder,
    so a call reads as one chain:

    ```python
    from okta_request import Okta

    okta = Okta(org="dev-123456", api_key="...")

    user = (
        okta.request()
        .get("users/me")
        .query({"expand": "groups"})
        .send()
    )
    print(user.profile.login)
    ```

    The HTTP client is injected and owned by the caller. Any object with an
    httpx compatible ``request(method, url, **kwargs)`` method works; the
    response must expose ``status_code`` and ``text``.
    """

    def __init__(self, client: Any) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._client = client

        self._method: Optional[str] = None
        self._endpoint: Optional[str] = None
        self._options: dict[str, Any] = {}
        self._assoc = False

    def method(self, method: str) -> "Request":
        """Set the HTTP method (GET, POST, PUT or DELETE).

        Raises:
            InvalidArgumentError: If ``method`` is not one of the accepted verbs.
        """
        if method not in HTTP_METHODS:
            raise InvalidArgumentError(
                f"Method parameter not an acceptable HTTP method ({', '.join(HTTP_METHODS)}): {method!r}"
            )

        self._method = method
        return self

    def endpoint(self, endpoint: str) -> "Request":
        """Set the endpoint, an absolute URL or a path relative to the client's base URL."""
        self._endpoint = endpoint
        return self

    def get(self, endpoint: str) -> "Request":
        return self.method("GET").endpoint(endpoint)

    def post(self, endpoint: str) -> "Request":
        return self.method("POST").endpoint(endpoint)

    def put(self, endpoint: str) -> "Request":
        return self.method("PUT").endpoint(endpoint)

    def delete(self, endpoint: str) -> "Request":
        return self.method("DELETE").endpoint(endpoint)

    def option(self, key: str, value: Any) -> "Request":
        """Set an arbitrary request option, replacing any previous value."""
        self._options[key] = value
        return self

    def _merge_option(self, key: str, value: Any, override: bool) -> "Request":
        current = self._options.get(key)
        if not override and isinstance(current, Mapping) and isinstance(value, Mapping):
            value = {**current, **value}
        elif isinstance(value, Mapping):
            value = dict(value)
        return self.option(key, value)

    def query(self, query: Mapping[str, Any], override: bool = False) -> "Request":
        """Add query string values to the request.

        Args:
            query: Query string values.
            override: Replace every previously added value instead of merging.
        """
        return self._merge_option("query", query, override)

    def json(self, data: Any, override: bool = False) -> "Request":
        """Set the JSON body of the request.

        Mappings are merged into the body added so far (new keys win) unless
        ``override`` is true. Any other payload, such as a list, replaces it.
        """
        return self._merge_option("json", data, override)

    def data(self, data: Any, override: bool = False) -> "Request":
        """Alias of :meth:`json`."""
        return self.json(data, override)

    def timeout(self, seconds: float) -> "Request":
        """Seconds to wait for the response. ``0`` waits indefinitely."""
        if isinstance(seconds, bool) or not isinstance(seconds, (int, float)):
            raise InvalidArgumentError(f"Timeout must be a number, got {seconds!r}")
        if seconds < 0:
            raise InvalidArgumentError(f"Timeout must not be negative, got {seconds}")

        return self.option("timeout", float(seconds))

    def assoc(self, assoc: bool = True) -> "Request":
        """Return decoded objects as plain dicts instead of attribute records."""
        self._assoc = assoc
        return self

    def spec(self) -> RequestSpec:
        """Resolve the accumulated state into the request that will be sent.

        Raises:
            InvalidStateError: If the method or endpoint has not been set.
        """
        missing = [
            name
            for name, value in (("method", self._method), ("endpoint", self._endpoint))
            if value is None
        ]
        if missing:
            raise InvalidStateError(
                f"Cannot send request, {' and '.join(missing)} not set"
            )

        return RequestSpec.from_options(
            self._method,  # type: ignore[arg-type]
            self._endpoint,  # type: ignore[arg-type]
            self._options,
        )

    def send(self) -> Any:
        """Send the request and decode the response.

        Returns:
            The decoded JSON body: ``SimpleNamespace`` records by default, plain
            dicts after ``assoc(True)``, ``None`` for an empty body.

        Raises:
            InvalidStateError: If the method or endpoint has not been set.
            OktaApiException: If the status code is not 200-206.
            ResponseDecodeError: If a successful response is not valid JSON.
        """
        spec = self.spec()
        self._logger.debug(f"Request: {spec.method} {spec.endpoint}")

        response = self._client.request(
            spec.method, spec.endpoint, **spec.to_httpx_kwargs()
        )

        return self._resolve(response)

    async def send_async(self) -> Any:
        """Asynchronously send the request, for an ``httpx.AsyncClient``.

        Same contract as :meth:`send`.
        """
        spec = self.spec()
        self._logger.debug(f"Request: {spec.method} {spec.endpoint}")

        response = await self._client.request(
            spec.method, spec.endpoint, **spec.to_httpx_kwargs()
        )

        return self._resolve(response)

    def _resolve(self, response: Any) -> Any:
        status_code = response.status_code
        body = response.text
        self._logger.debug(f"Response: {status_code}")

        if status_code not in SUCCESS_STATUS_CODES:
            self._logger.debug(f"Error response body: {body}")
            raise OktaApiException(status_code, body, decode_error_body(body))

        try:
            return decode_body(body, as_mapping=self._assoc)
        except ValueError as e:
            raise ResponseDecodeError(status_code, body) from e
