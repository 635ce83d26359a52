from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.text import Text

from ..config import JASON_CONFIG

LOGGER_NAME = "jason"

_ACTION_COLORS = {
    "read": "cyan",
    "write": "green",
}


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def action_extra(action: str) -> dict[str, str]:
    """Extra fields that let the console handler highlight ``action``."""
    color = _ACTION_COLORS.get(action)
    if color is None:
        return {}
    return {"jason_action_color": color}


class _JasonRichConsoleHandler(logging.Handler):
    def __init__(self, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._console = Console(stderr=True, highlight=False)

    @staticmethod
    def _format_location(record: logging.LogRecord) -> str:
        return f"[{Path(record.pathname).name}:{record.lineno}]"

    @staticmethod
    def _format_message_text(record: logging.LogRecord) -> Text:
        message = record.getMessage()
        text = Text(message)
        color = getattr(record, "jason_action_color", None)
        if color:
            action = message.split(" ", 1)[0]
            text.stylize(color, 0, len(action))
        return text

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = Text()
            line.append(f"{record.levelname:<7} ", style="bold")
            line.append_text(self._format_message_text(record))
            line.append(" ")
            line.append(self._format_location(record), style="dim")
            self._console.print(line)
        except Exception:
            self.handleError(record)


def configure_logging() -> logging.Logger:
    """Attach the rich console handler to the jason logger once.

    The level is taken from ``JASON_CONFIG.log_level`` on every call.
    """
    logger = get_logger()
    logger.setLevel(JASON_CONFIG.log_level)
    if not any(isinstance(h, _JasonRichConsoleHandler) for h in logger.handlers):
        logger.addHandler(_JasonRichConsoleHandler())
    return logger


__all__ = ["LOGGER_NAME", "action_extra", "configure_logging", "get_logger"]
