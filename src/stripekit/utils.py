import logging
from typing import Union

logger = logging.getLogger("stripekit")

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logger(level: Union[int, str] = "INFO") -> logging.Logger:
    """
    Attach a stream handler to the package logger and set its level.

    Calling it again only updates the level.

    Args:
        level: Logging level name or number.

    Returns:
        The package logger.
    """
    if not any(getattr(h, "_stripekit", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        handler._stripekit = True
        logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
