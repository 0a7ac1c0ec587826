import logging
import sys

from .constants import LOGGER_NAME

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure the ``okta_request`` logger.

    Attaches a single stderr handler (calling this twice does not duplicate
    output) and sets the level to DEBUG or WARNING.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)

    if not any(getattr(h, "_okta_request", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        handler._okta_request = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger
