from ._decoding import decode_body, decode_error_body
from ._logs import setup_logging
from ._request_spec import RequestSpec
from ._ssl_context import get_httpx_client_kwargs

__all__ = [
    "decode_body",
    "decode_error_body",
    "get_httpx_client_kwargs",
    "setup_logging",
    "RequestSpec",
]
