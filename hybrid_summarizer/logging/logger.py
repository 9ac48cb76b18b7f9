"""Process-wide logging facade.

Log lines go to stderr unless told otherwise; stdout belongs to the
summary stream written by the CLI.
"""

import logging
import sys
from typing import TextIO

LOGGER_NAME = "hybrid_summarizer"
_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


class Log:
    """Classmethod wrapper around the ``hybrid_summarizer`` logger."""

    _logger: logging.Logger = logging.getLogger(LOGGER_NAME)

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and route output to *stream* (stderr by default).

        Safe to call more than once: the previous handler is replaced, not
        stacked.
        """
        cls._logger.setLevel(log_level.upper())
        for existing in list(cls._logger.handlers):
            cls._logger.removeHandler(existing)
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        cls._logger.addHandler(handler)

    @classmethod
    def debug(cls, message: str) -> None:
        cls._logger.debug(message)

    @classmethod
    def info(cls, message: str) -> None:
        cls._logger.info(message)

    @classmethod
    def warning(cls, message: str) -> None:
        cls._logger.warning(message)

    @classmethod
    def error(cls, message: str) -> None:
        cls._logger.error(message)

    @classmethod
    def exception(cls, message: str) -> None:
        """Log at error level with the traceback of the exception being handled."""
        cls._logger.exception(message)
