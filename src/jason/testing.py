from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass

import pytest

from .config import JASON_CONFIG


@dataclass(frozen=True)
class _JasonConfigSnapshot:
    indent: int
    ensure_ascii: bool
    encoding: str
    log_level: str

    @classmethod
    def capture(cls) -> "_JasonConfigSnapshot":
        return cls(
            indent=JASON_CONFIG.indent,
            ensure_ascii=JASON_CONFIG.ensure_ascii,
            encoding=JASON_CONFIG.encoding,
            log_level=JASON_CONFIG.log_level,
        )

    def restore(self) -> None:
        JASON_CONFIG.indent = self.indent
        JASON_CONFIG.ensure_ascii = self.ensure_ascii
        JASON_CONFIG.encoding = self.encoding
        JASON_CONFIG.log_level = self.log_level


def _apply_test_config() -> None:
    JASON_CONFIG.indent = 2
    JASON_CONFIG.ensure_ascii = True
    JASON_CONFIG.encoding = "utf-8"
    JASON_CONFIG.log_level = "DEBUG"


@contextmanager
def jason_test_env() -> Generator[None, None, None]:
    """Run with default settings, whatever the environment says, then restore."""
    snapshot = _JasonConfigSnapshot.capture()
    _apply_test_config()
    try:
        yield
    finally:
        snapshot.restore()


@pytest.fixture()
def jason_tmp_config() -> Generator[None, None, None]:
    """Reset jason settings to their defaults for the test."""
    with jason_test_env():
        yield
