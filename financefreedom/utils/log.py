"""Logging setup."""
import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(debug: bool = False) -> None:
    """Install the package log format on the root logger, once."""
    if logging.root.handlers:
        logging.getLogger("financefreedom").setLevel(logging.DEBUG if debug else logging.INFO)
        return
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO, format=LOG_FORMAT)
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.INFO if debug else logging.WARNING)
