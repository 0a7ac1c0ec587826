from .errors import ApiKeyMissingError, OrgMissingError
from .exceptions import (
    InvalidArgumentError,
    InvalidStateError,
    OktaApiException,
    OktaError,
    ResponseDecodeError,
)

__all__ = [
    "ApiKeyMissingError",
    "InvalidArgumentError",
    "InvalidStateError",
    "OktaApiException",
    "OktaError",
    "OrgMissingError",
    "ResponseDecodeError",
]
