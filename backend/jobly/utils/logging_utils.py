import logging
import sys


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a console handler to the ``jobly`` logger.

    Safe to call more than once (every app instance calls it); existing
    handlers are replaced rather than duplicated.
    """
    logger = logging.getLogger("jobly")
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)
    logger.propagate = False
    return logger
