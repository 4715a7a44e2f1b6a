from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.text import Text

LOGGER_NAME = "jsonaccess"

_LEVEL_STYLES = {
    logging.DEBUG: "dim",
    logging.INFO: "cyan",
    logging.WARNING: "yellow",
    logging.ERROR: "red",
    logging.CRITICAL: "bold red",
}


class _JsonAccessRichConsoleHandler(logging.Handler):
    def __init__(self, console: Console | None = None) -> None:
        super().__init__()
        self._console = console or Console(stderr=True)

    @staticmethod
    def _format_location(record: logging.LogRecord) -> str:
        return f"[{Path(record.pathname).name}:{record.lineno}]"

    @staticmethod
    def _format_message_text(record: logging.LogRecord) -> Text:
        text = Text()
        text.append(record.levelname, style=_LEVEL_STYLES.get(record.levelno, ""))
        text.append(" ")
        text.append(record.getMessage())
        return text

    def emit(self, record: logging.LogRecord) -> None:
        try:
            text = self._format_message_text(record)
            text.append(" ")
            text.append(self._format_location(record), style="dim")
            self._console.print(text, markup=False, highlight=False)
        except Exception:
            self.handleError(record)


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def configure_logging(level: int = logging.WARNING) -> logging.Logger:
    """Attach the rich console handler to the package logger once."""
    logger = get_logger()
    logger.setLevel(level)
    if not any(
        isinstance(handler, _JsonAccessRichConsoleHandler)
        for handler in logger.handlers
    ):
        logger.addHandler(_JsonAccessRichConsoleHandler())
    return logger


__all__ = ["LOGGER_NAME", "configure_logging", "get_logger"]
