"""
Fluent request builder for the Okta REST API.
"""

from ._config import Config
from ._okta import Okta
from ._request import Request
from ._utils import RequestSpec
from ._version import __version__
from .models import (
    ApiKeyMissingError,
    InvalidArgumentError,
    InvalidStateError,
    OktaApiException,
    OktaError,
    OrgMissingError,
    ResponseDecodeError,
)

__all__ = [
    "__version__",
    "ApiKeyMissingError",
    "Config",
    "InvalidArgumentError",
    "InvalidStateError",
    "Okta",
    "OktaApiException",
    "OktaError",
    "OrgMissingError",
    "Request",
    "RequestSpec",
    "ResponseDecodeError",
]
