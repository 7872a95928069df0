# convoso_client/logging_setup.py
import logging

LOGGER_NAME = "convoso_client"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a stream handler to the package logger; for scripts, not for library use."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if not logger.handlers:
        fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s")
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(fmt)
        logger.addHandler(stream_handler)
    logger.propagate = False
    logging.getLogger("httpx").setLevel(logging.WARNING)
    return logger
