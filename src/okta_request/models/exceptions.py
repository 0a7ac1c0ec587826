from typing import Any, Optional


class OktaError(Exception):
    """Base class for errors raised by okta_request."""


class InvalidArgumentError(OktaError, ValueError):
    """A builder setter was given a value it does not accept."""


class InvalidStateError(OktaError, RuntimeError):
    """The request is not fully configured (method or endpoint missing)."""


class OktaApiException(OktaError):
    """Raised when Okta answers with a status outside the success allowlist.

    Okta reports failures as an error object::

        {
            "errorCode": "E0000007",
            "errorSummary": "Not found: Resource not found: xyz (User)",
            "errorLink": "E0000007",
            "errorId": "oaeXXXX",
            "errorCauses": [{"errorSummary": "..."}]
        }

    The decoded object is available as ``payload`` (``None`` when the body was
    empty or not JSON) and its fields through the ``error_*`` properties.
    """

    MAX_BODY_IN_MESSAGE = 200

    def __init__(self, status_code: int, body: str, payload: Any = None) -> None:
        self.status_code = status_code
        self.body = body
        self.payload = payload
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        detail = self.error_summary
        if not detail and self.body:
            detail = self.body[: self.MAX_BODY_IN_MESSAGE]
        if detail:
            return f"{self.status_code}: {detail}"
        return f"{self.status_code}: Okta API request failed"

    def _field(self, name: str) -> Any:
        if isinstance(self.payload, dict):
            return self.payload.get(name)
        return None

    @property
    def error_code(self) -> Optional[str]:
        return self._field("errorCode")

    @property
    def error_summary(self) -> Optional[str]:
        return self._field("errorSummary")

    @property
    def error_link(self) -> Optional[str]:
        return self._field("errorLink")

    @property
    def error_id(self) -> Optional[str]:
        return self._field("errorId")

    @property
    def error_causes(self) -> list[str]:
        causes = self._field("errorCauses") or []
        return [
            cause["errorSummary"]
            for cause in causes
            if isinstance(cause, dict) and "errorSummary" in cause
        ]


class ResponseDecodeError(OktaError, ValueError):
    """A successful response carried a body that is not valid JSON."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"Could not decode JSON from {status_code} response: {body[:200]!r}"
        )
