import logging
from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass

import pytest

from .config import TQ_CONFIG, ColorChoice, Format


@dataclass(frozen=True)
class _TqConfigSnapshot:
    input_format: Format
    output_format: Format
    color: ColorChoice
    log_level: int

    @classmethod
    def capture(cls) -> "_TqConfigSnapshot":
        return cls(
            input_format=TQ_CONFIG.input_format,
            output_format=TQ_CONFIG.output_format,
            color=TQ_CONFIG.color,
            log_level=TQ_CONFIG.log_level,
        )

    def restore(self) -> None:
        TQ_CONFIG.input_format = self.input_format
        TQ_CONFIG.output_format = self.output_format
        TQ_CONFIG.color = self.color
        TQ_CONFIG.log_level = self.log_level


def _apply_test_config() -> None:
    TQ_CONFIG.input_format = "toml"
    TQ_CONFIG.output_format = "toml"
    TQ_CONFIG.color = "never"
    TQ_CONFIG.log_level = logging.WARNING


@contextmanager
def tq_test_env() -> Generator[None, None, None]:
    """Run with deterministic defaults, restoring ``TQ_CONFIG`` afterwards."""
    snapshot = _TqConfigSnapshot.capture()
    _apply_test_config()
    try:
        yield
    finally:
        snapshot.restore()


@pytest.fixture()
def tq_config() -> Generator[object, None, None]:
    """Configure tq with test defaults for the duration of the test."""
    with tq_test_env():
        yield TQ_CONFIG
