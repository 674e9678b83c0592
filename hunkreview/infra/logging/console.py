import logging
from typing import Any, TextIO

from hunkreview.core.ports.logger import Logger

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s %(message)s"


def _logfmt_value(value: Any) -> str:
    text = str(value)
    if not text or any(char in text for char in ' "='):
        return '"' + text.replace('"', '\\"') + '"'
    return text


class _LogfmtFormatter(logging.Formatter):
    """Appends the record's review context as logfmt pairs, e.g. ``path=a.go hunk=2``."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = getattr(record, "review_context", None) or {}
        if not context:
            return line
        pairs = " ".join(
            f"{key}={_logfmt_value(value)}" for key, value in context.items()
        )
        head, newline, rest = line.partition("\n")
        # Keep tracebacks below the pairs so the first line stays greppable.
        return f"{head} {pairs}{newline}{rest}"


class ConsoleLogger(Logger):
    def __init__(
        self, name: str, level: str = "INFO", stream: TextIO | None = None
    ) -> None:
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level.upper())
        self._logger.propagate = False
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
        handler = logging.StreamHandler(stream)
        handler.setFormatter(_LogfmtFormatter(_FORMAT))
        self._logger.addHandler(handler)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(message, extra={"review_context": kwargs})

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.info(message, extra={"review_context": kwargs})

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(message, extra={"review_context": kwargs})

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.error(message, extra={"review_context": kwargs})

    def exception(self, message: str, **kwargs: Any) -> None:
        self._logger.exception(message, extra={"review_context": kwargs})
