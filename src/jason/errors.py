from __future__ import annotations


class JasonError(Exception):
    """Base class for every error raised by jason."""


class InvalidInput(JasonError, ValueError):
    """A path, handle or root value passed to jason cannot be used."""


class ParseError(JasonError, ValueError):
    """JSON text could not be decoded.

    ``position`` is the character offset of the failure, ``lineno`` and
    ``colno`` are 1-based. ``context`` holds a short excerpt of the text
    around ``position``. Any of them may be ``None`` when the underlying
    decoder does not report it.
    """

    def __init__(
        self,
        message: str,
        *,
        position: int | None = None,
        lineno: int | None = None,
        colno: int | None = None,
        context: str | None = None,
    ) -> None:
        super().__init__(message)
        self.position = position
        self.lineno = lineno
        self.colno = colno
        self.context = context

    def __str__(self) -> str:
        message = super().__str__()
        if self.lineno is None:
            return message
        return f"{message} (line {self.lineno} column {self.colno})"


class SerializeError(JasonError, ValueError):
    """A value cannot be represented as JSON."""


__all__ = ["InvalidInput", "JasonError", "ParseError", "SerializeError"]
