from __future__ import annotations

import io
import os
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import IO, Any

from . import codec
from .config import JASON_CONFIG
from .errors import InvalidInput, ParseError, SerializeError
from .paths import (
    PATH_MISSING,
    JSONContainer,
    JSONValue,
    PathKey,
    get_path,
    has_paths,
    set_path,
)
from .runtime.logging import action_extra, get_logger

logger = get_logger()


def _as_root(value: Any) -> JSONContainer:
    if not isinstance(value, (dict, list)):
        raise InvalidInput(
            f"document root must be an object or an array, got {type(value).__name__}"
        )
    return value


def _is_binary(handle: IO[Any]) -> bool:
    if isinstance(handle, io.TextIOBase):
        return False
    if isinstance(handle, (io.RawIOBase, io.BufferedIOBase)):
        return True
    return "b" in str(getattr(handle, "mode", ""))


def _as_text(contents: str | bytes | bytearray) -> str:
    if isinstance(contents, str):
        return contents
    try:
        return bytes(contents).decode(JASON_CONFIG.encoding)
    except UnicodeDecodeError as exc:
        raise ParseError(
            f"invalid {exc.encoding} text: {exc.reason}", position=exc.start
        ) from exc


def _as_bytes(text: str) -> bytes:
    try:
        return text.encode(JASON_CONFIG.encoding)
    except UnicodeEncodeError as exc:
        raise SerializeError(
            f"cannot encode document as {exc.encoding}: {exc.reason}"
        ) from exc


def _stream_name(handle: IO[Any]) -> str:
    return str(getattr(handle, "name", "<anonymous>"))


def _check_handle(handle: Any, method: str, check: str) -> None:
    if not all(hasattr(handle, name) for name in (method, check)):
        raise InvalidInput("invalid stream handle")
    if getattr(handle, "closed", False):
        raise InvalidInput("the specified stream is closed")
    try:
        usable = getattr(handle, check)()
    except (OSError, ValueError) as exc:
        raise InvalidInput(f"the specified stream is not {check}") from exc
    if not usable:
        raise InvalidInput(f"the specified stream is not {check}")


class Document:
    """A JSON document addressed with dot-separated paths.

    The root is a dict or a list. ``Document("")`` and ``Document()`` are
    empty dicts. Text (``str`` or ``bytes``) is decoded; a dict or list is
    wrapped without copying.
    """

    def __init__(self, contents: str | bytes | JSONContainer = "") -> None:
        if isinstance(contents, (dict, list)):
            self._root: JSONContainer = contents
        elif contents:
            self._root = _as_root(codec.decode(contents))
        else:
            self._root = {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._root!r})"

    def __str__(self) -> str:
        return self.to_string()

    # Constructors

    @classmethod
    def from_data(cls, data: JSONContainer) -> Document:
        return cls(_as_root(data))

    @classmethod
    def from_string(cls, contents: str | bytes) -> Document:
        return cls(contents)

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> Document:
        """Read and decode the file at ``path``.

        Raises ``InvalidInput`` when the path does not exist, is not a
        regular file or cannot be read, and ``ParseError`` when its contents
        are not JSON. An empty file gives an empty document.
        """
        file_path = Path(path)
        if not file_path.exists():
            raise InvalidInput(f"the specified file does not exist: {file_path}")
        if not file_path.is_file():
            raise InvalidInput(f"the specified path is not a file: {file_path}")
        if not os.access(file_path, os.R_OK):
            raise InvalidInput(f"the specified file is not readable: {file_path}")
        try:
            contents = file_path.read_bytes()
        except OSError as exc:
            raise InvalidInput(f"could not read {file_path}: {exc}") from exc
        logger.debug(
            "read file %s (%d bytes)", file_path, len(contents), extra=action_extra("read")
        )
        return cls(_as_text(contents))

    @classmethod
    def from_stream(cls, handle: IO[Any]) -> Document:
        """Read everything left in ``handle`` and decode it.

        Text and binary handles are both accepted. The handle is left open.
        """
        _check_handle(handle, "read", "readable")
        try:
            contents = handle.read()
        except OSError as exc:
            raise InvalidInput(f"could not read from stream: {exc}") from exc
        logger.debug("read stream %s", _stream_name(handle), extra=action_extra("read"))
        return cls(_as_text(contents))

    # Codec

    @staticmethod
    def decode(text: str | bytes) -> JSONValue:
        return codec.decode(text)

    @staticmethod
    def encode(value: Any, pretty: bool = False) -> str:
        return codec.encode(value, pretty)

    # Output

    def to_string(self, pretty: bool = False) -> str:
        return codec.encode(self._root, pretty)

    def to_file(
        self,
        path: str | os.PathLike[str],
        overwrite: bool = False,
        pretty: bool = False,
    ) -> None:
        """Write the document to ``path``.

        An existing file is only replaced when ``overwrite`` is true. The
        text is serialized and encoded in ``JASON_CONFIG.encoding`` before the
        file is opened, so a ``SerializeError`` leaves any existing file as it
        was.
        """
        file_path = Path(path)
        if file_path.is_dir():
            raise InvalidInput(f"the specified path is a directory: {file_path}")
        if file_path.exists():
            if not overwrite:
                raise InvalidInput(f"the specified file already exists: {file_path}")
            if not os.access(file_path, os.W_OK):
                raise InvalidInput(f"the specified file is not writeable: {file_path}")
        text = self.to_string(pretty)
        payload = _as_bytes(text)
        try:
            file_path.write_bytes(payload)
        except OSError as exc:
            raise InvalidInput(f"could not write {file_path}: {exc}") from exc
        logger.debug(
            "write file %s (%d chars)", file_path, len(text), extra=action_extra("write")
        )

    def to_stream(self, handle: IO[Any], pretty: bool = False) -> None:
        """Write the document to ``handle``, which is left open."""
        _check_handle(handle, "write", "writable")
        text = self.to_string(pretty)
        payload: str | bytes = text
        if _is_binary(handle):
            payload = _as_bytes(text)
        try:
            handle.write(payload)
        except UnicodeEncodeError as exc:
            raise SerializeError(f"cannot encode document for stream: {exc.reason}") from exc
        except (OSError, TypeError) as exc:
            raise InvalidInput(f"could not write to stream: {exc}") from exc
        logger.debug("write stream %s", _stream_name(handle), extra=action_extra("write"))

    def to_data(self) -> JSONContainer:
        """Return the underlying tree.

        Callers should treat it as read-only and go through :meth:`set` for
        changes.
        """
        return self._root

    # Accessors

    def has(self, keys: PathKey | Iterable[PathKey]) -> bool:
        return has_paths(self._root, keys)

    def get(self, key: PathKey, default: Any = None) -> Any:
        found = get_path(self._root, key)
        if found is PATH_MISSING:
            return default
        return found

    def set(
        self,
        keys: PathKey | Mapping[PathKey, Any],
        value: Any = None,
    ) -> Document:
        """Assign ``value`` at the path ``keys``, or every pair of a mapping.

        A dotted key is always split into a path, even when a literal key
        with the same name exists at the top level.
        """
        if isinstance(keys, Mapping):
            for key, item in keys.items():
                self.set(key, item)
            return self
        self._root = set_path(self._root, keys, value)
        return self


__all__ = ["Document"]
