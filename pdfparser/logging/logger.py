import logging
import sys

_DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


class Log:
    """Process-wide logging facade for the pdfparser service."""

    _logger: logging.Logger = logging.getLogger("pdfparser")

    @classmethod
    def configure(cls, log_level: str, fmt: str = _DEFAULT_FORMAT) -> None:
        """Set the level and attach a single stderr handler.

        stdout is left to command output. Calling it again only changes the
        level; handlers are never duplicated.
        """
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(fmt))
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
