import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str, level=logging.WARNING) -> logging.Logger:
    logger: logging.Logger = logging.getLogger(name)
    logging.basicConfig(format=LOG_FORMAT, level=level)
    return logger


def configure_logging(level: str | int | None = None) -> int:
    """Set the root log level from *level* (name or number).

    Returns the numeric level applied.
    """
    if level is None:
        numeric = logging.WARNING
    elif isinstance(level, int):
        numeric = level
    else:
        numeric = logging.getLevelName(level.upper())
        if not isinstance(numeric, int):
            raise ValueError(f"unknown log level: {level}")
    logging.basicConfig(format=LOG_FORMAT, level=numeric)
    logging.getLogger().setLevel(numeric)
    return numeric
