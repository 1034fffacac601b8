import logging
import sys

_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


class Log:
    """Worker-wide logger.

    Keyword arguments are treated as context and rendered after the message
    as ``key=value`` pairs, e.g. ``Log.info("Job finished", job_id=3)``.
    """

    _logger: logging.Logger = logging.getLogger("visadocs")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the level and attach a single stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(_FORMAT))
            cls._logger.addHandler(handler)
            cls._logger.propagate = False

    @classmethod
    def info(cls, message: str, **context: object) -> None:
        cls._logger.info(_render(message, context))

    @classmethod
    def error(cls, message: str, **context: object) -> None:
        cls._logger.error(_render(message, context))

    @classmethod
    def warning(cls, message: str, **context: object) -> None:
        cls._logger.warning(_render(message, context))

    @classmethod
    def debug(cls, message: str, **context: object) -> None:
        cls._logger.debug(_render(message, context))


def _render(message: str, context: dict[str, object]) -> str:
    if not context:
        return message
    pairs = " ".join(f"{key}={value}" for key, value in context.items())
    return f"{message} | {pairs}"
