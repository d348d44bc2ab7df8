import logging
import sys
from typing import IO, Optional, Union

NORMAL_FORMATTER = logging.Formatter("%(levelname)s %(asctime)s: %(name)s: %(message)s")
LOGGER_NAME = "rqueue"

logger = logging.getLogger(LOGGER_NAME)


def setup_logger(
    level: Union[int, str] = logging.WARNING, stream: Optional[IO[str]] = None
) -> logging.Logger:
    """Attach a stream handler to the package logger.
    Calling this twice replaces the handler instead of stacking another one.
    """
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
    for handler in list(logger.handlers):
        if getattr(handler, "_rqueue", False):
            logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr if stream is None else stream)
    handler.setFormatter(NORMAL_FORMATTER)
    handler._rqueue = True  # type: ignore
    logger.addHandler(handler)
    return logger
