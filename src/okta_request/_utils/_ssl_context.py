import os
import ssl
from typing import Any, Optional

import truststore

# extra CA locations honoured on top of the system trust store
ENV_CA_FILES = ("SSL_CERT_FILE", "REQUESTS_CA_BUNDLE")
ENV_CA_DIR = "SSL_CERT_DIR"


def _env_path(name: str) -> Optional[str]:
    value = os.environ.get(name)
    if not value:
        return None
    return os.path.expanduser(os.path.expandvars(value))


def create_ssl_context() -> ssl.SSLContext:
    """SSL context backed by the operating system's certificate store.

    Corporate CA bundles named by ``SSL_CERT_FILE`` / ``REQUESTS_CA_BUNDLE`` or
    ``SSL_CERT_DIR`` are loaded in addition to the system certificates.
    """
    context = truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)

    cafile = next(
        (path for path in map(_env_path, ENV_CA_FILES) if path is not None), None
    )
    capath = _env_path(ENV_CA_DIR)
    if cafile or capath:
        context.load_verify_locations(cafile=cafile, capath=capath)

    return context


def get_httpx_client_kwargs() -> dict[str, Any]:
    """Keyword arguments shared by every httpx client the SDK builds.

    Proxy settings are picked up by httpx itself from the usual
    ``HTTP(S)_PROXY`` / ``NO_PROXY`` environment variables.
    """
    return {
        "verify": create_ssl_context(),
        "follow_redirects": True,
        "timeout": 30.0,
    }
