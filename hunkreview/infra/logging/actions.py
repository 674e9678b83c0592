import sys
from typing import Any, TextIO

from hunkreview.core.ports.logger import Logger


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class ActionsLogger(Logger):
    """Emits GitHub Actions workflow commands so messages surface as annotations."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def debug(self, message: str, **kwargs: Any) -> None:
        self._command("debug", message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._write(self._render(message, kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self._command("warning", message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._command("error", message, kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        error_type, error, _ = sys.exc_info()
        if error is not None:
            kwargs = {**kwargs, "exc": f"{error_type.__name__}: {error}"}
        self._command("error", message, kwargs)

    def _command(self, name: str, message: str, context: dict[str, Any]) -> None:
        self._write(f"::{name}::{_escape_data(self._render(message, context))}")

    def _render(self, message: str, context: dict[str, Any]) -> str:
        if not context:
            return message
        pairs = " ".join(f"{key}={value!r}" for key, value in context.items())
        return f"{message} | {pairs}"

    def _write(self, line: str) -> None:
        stream = self._stream or sys.stdout
        stream.write(line + "\n")
        stream.flush()
