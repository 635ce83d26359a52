"""
jason: a convenient wrapper for JSON documents.

This package uses a src-layout. Import the package as `jason`.
"""

from importlib.metadata import version

__version__ = version("jason")

from .codec import decode, encode
from .config import JASON_CONFIG, JasonConfig
from .document import Document
from .errors import InvalidInput, JasonError, ParseError, SerializeError
from .paths import PATH_MISSING, get_path, has_paths, set_path
from .runtime import configure_logging, get_logger

__all__ = [
    "__version__",
    "JASON_CONFIG",
    "Document",
    "InvalidInput",
    "JasonConfig",
    "JasonError",
    "PATH_MISSING",
    "ParseError",
    "SerializeError",
    "configure_logging",
    "decode",
    "encode",
    "get_logger",
    "get_path",
    "has_paths",
    "set_path",
]
