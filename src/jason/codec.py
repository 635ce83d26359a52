from __future__ import annotations

import json
from typing import Any, NoReturn

from .config import JASON_CONFIG
from .errors import ParseError, SerializeError
from .paths import JSONValue

_CONTEXT_RADIUS = 20
_COMPACT_SEPARATORS = (",", ":")


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"non-standard JSON constant {name}")


def _context(text: str, position: int) -> str:
    start = max(position - _CONTEXT_RADIUS, 0)
    return text[start : position + _CONTEXT_RADIUS]


def decode(text: str | bytes | bytearray) -> JSONValue:
    """Parse JSON text into a tree of dicts, lists and scalars.

    Bytes are decoded the way :func:`json.loads` does it (UTF-8, UTF-16 or
    UTF-32, detected from the first bytes). ``NaN`` and ``Infinity`` are
    rejected since they are not JSON.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise ParseError(
            exc.msg,
            position=exc.pos,
            lineno=exc.lineno,
            colno=exc.colno,
            context=_context(exc.doc, exc.pos),
        ) from exc
    except UnicodeDecodeError as exc:
        raise ParseError(
            f"invalid {exc.encoding} text: {exc.reason}",
            position=exc.start,
        ) from exc
    except ValueError as exc:
        raise ParseError(str(exc)) from exc
    except RecursionError as exc:
        raise ParseError("maximum nesting depth exceeded") from exc


def encode(value: Any, pretty: bool = False) -> str:
    """Serialize ``value`` to JSON text.

    The compact form has no whitespace at all. ``pretty`` indents nested
    values by ``JASON_CONFIG.indent`` spaces.
    """
    if pretty:
        options: dict[str, Any] = {"indent": JASON_CONFIG.indent}
    else:
        options = {"separators": _COMPACT_SEPARATORS}
    try:
        return json.dumps(
            value,
            ensure_ascii=JASON_CONFIG.ensure_ascii,
            allow_nan=False,
            **options,
        )
    except (TypeError, ValueError) as exc:
        raise SerializeError(str(exc)) from exc
    except RecursionError as exc:
        raise SerializeError("maximum nesting depth exceeded") from exc


__all__ = ["decode", "encode"]
