import logging
import sys

from .constants import LOGGER_NAME

_HANDLER_NAME = "jira_client_stream"


def setup_logging(debug: bool = False) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    # don't stack handlers when several clients are created
    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        )
        logger.addHandler(handler)

    return logger


def mask_headers(headers) -> dict:
    """Copy of ``headers`` safe to log."""
    masked = {}
    for key, value in dict(headers).items():
        if key.lower() in ("authorization", "cookie"):
            masked[key] = "***"
        else:
            masked[key] = value
    return masked
