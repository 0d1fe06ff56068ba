# gerrymander/logger.py
import logging
from .config import LOG_DIR

PACKAGE_LOGGER = "gerrymander"

# Handlers are attached once, to the package logger only
_configured = False


def _configure_package_logger() -> logging.Logger:
    """
    Attach the handlers every `gerrymander.*` logger shares.
    - Console: INFO+
    - File:    DEBUG+
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()

    LOG_DIR.mkdir(parents=True, exist_ok=True)
    fh = logging.FileHandler(LOG_DIR / "gerrymander.log", encoding="utf-8")
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - %(name)s - %(funcName)s:%(lineno)d - %(message)s"
    ))
    logger.addHandler(fh)

    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    ch.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(ch)

    return logger


def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    """
    Return a logger inside the package hierarchy.

    Module loggers (`get_logger(__name__)`) carry no handlers of their own and
    reach the console and log file through the package logger, so each record
    is written exactly once. Names outside the package are nested under it.
    """
    global _configured
    if not _configured:
        _configure_package_logger()
        _configured = True

    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
