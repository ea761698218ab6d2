"""Logger configuration shared by the feed client and the map modules."""

import logging

LOGGER_NAME = "quake_map"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Attach a console handler to the package logger.

    Streamlit re-executes the script on every interaction, so the handler is
    only added the first time.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    if not any(getattr(h, "_quake_map", False) for h in logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        console_handler._quake_map = True
        logger.addHandler(console_handler)

    return logger
