import logging
import sys

LOGGER_NAME = "nucfreq"
LOG_FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"


def get_logger(module: str = "") -> logging.Logger:
    """Library modules log through children of the ``nucfreq`` logger."""
    return logging.getLogger(f"{LOGGER_NAME}.{module}" if module else LOGGER_NAME)


def setup_logger(log_file=None, verbose=False):
    """
    Attach console (and optional file) handlers to the ``nucfreq`` logger.

    Calling it again replaces the handlers instead of stacking them, so the
    CLI can be invoked repeatedly in one process (tests do this).
    """
    logger = get_logger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.DEBUG if verbose else logging.INFO)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_file:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger
