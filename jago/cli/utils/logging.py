import logging
import sys


logger = logging.getLogger("jago")


def configure_logging(debug: bool):
    """
    Configures jago and dulwich logging based on the debug flag.

    dulwich only speaks up on warnings unless debugging.
    """
    log_level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(log_level)
    logging.getLogger("dulwich").setLevel(
        logging.DEBUG if debug else logging.WARNING
    )

    if not logger.hasHandlers():
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
