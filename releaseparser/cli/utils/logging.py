import logging
import sys


logger = logging.getLogger("releaseparser")


def configure_logging(debug: bool):
    """
    Configures the releaseparser logger based on the debug flag.
    """
    log_level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(log_level)

    if not logger.hasHandlers():
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
