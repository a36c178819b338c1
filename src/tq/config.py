import logging
import os
from typing import Literal, TypeAlias, cast, get_args

from .errors import ConfigError

Format: TypeAlias = Literal["toml", "json"]
ColorChoice: TypeAlias = Literal["auto", "always", "never"]

FORMATS: tuple[Format, ...] = get_args(Format)
COLOR_CHOICES: tuple[ColorChoice, ...] = get_args(ColorChoice)


class TqConfig:
    """Process-wide defaults, read from ``TQ_*`` environment variables."""

    def __init__(self) -> None:
        self.input_format: Format = parse_format(
            os.getenv("TQ_INPUT_FORMAT", "toml"), "TQ_INPUT_FORMAT"
        )
        self.output_format: Format = parse_format(
            os.getenv("TQ_OUTPUT_FORMAT", "toml"), "TQ_OUTPUT_FORMAT"
        )
        self.color: ColorChoice = parse_color(
            os.getenv("TQ_COLOR", "auto"), "TQ_COLOR"
        )
        self.log_level: int = parse_log_level(
            os.getenv("TQ_LOG_LEVEL", "WARNING"), "TQ_LOG_LEVEL"
        )


def parse_format(raw: str, source: str) -> Format:
    value = raw.strip().lower()
    if value not in FORMATS:
        raise ConfigError(
            f"{source} must be one of {', '.join(FORMATS)}; got {raw!r}"
        )
    return cast(Format, value)


def parse_color(raw: str, source: str) -> ColorChoice:
    value = raw.strip().lower()
    if value not in COLOR_CHOICES:
        raise ConfigError(
            f"{source} must be one of {', '.join(COLOR_CHOICES)}; got {raw!r}"
        )
    return cast(ColorChoice, value)


def parse_log_level(raw: str, source: str) -> int:
    value = raw.strip().upper()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value)
    if not isinstance(level, int):
        raise ConfigError(f"{source} is not a logging level name; got {raw!r}")
    return level


TQ_CONFIG = TqConfig()
