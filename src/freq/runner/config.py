"""Configuration for frequency reports."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from .tokenize import TokenMode
from .url import DEFAULT_TIMEOUT

DEFAULT_LENGTH = 10
DEFAULT_WIDTH = 80

# Narrowest chart that still fits a one-character label, the axis and "100.00%"
MIN_WIDTH = 12


def parse_mode(value: Any) -> TokenMode:
    """Parse a token mode from a config value ('word'/'w' or 'character'/'char'/'c')."""
    if isinstance(value, TokenMode):
        return value
    aliases = {
        "word": TokenMode.WORD,
        "w": TokenMode.WORD,
        "character": TokenMode.CHARACTER,
        "char": TokenMode.CHARACTER,
        "c": TokenMode.CHARACTER,
    }
    key = str(value).strip().lower()
    if key not in aliases:
        raise ValueError(f"Unknown mode: {value!r}. Expected 'word' or 'character'")
    return aliases[key]


@dataclass
class FreqConfig:
    """Settings for one frequency report.

    Attributes:
        length: Number of top tokens to report.
        mode: Word or character tokenization.
        scaled: Scale bars relative to the top token instead of the total.
        width: Total chart width in columns.
        encoding: Text encoding used to read local files.
        timeout: Timeout in seconds for fetching URL inputs.
    """

    length: int = DEFAULT_LENGTH
    mode: TokenMode = TokenMode.WORD
    scaled: bool = False
    width: int = DEFAULT_WIDTH
    encoding: str = "utf-8"
    timeout: int = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        """Validate settings after init."""
        self.mode = parse_mode(self.mode)
        for name in ("length", "width", "timeout"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if not isinstance(self.scaled, bool):
            raise ValueError(f"scaled must be true or false, got {self.scaled!r}")
        if self.length < 0:
            raise ValueError(f"length must be non-negative, got {self.length}")
        if self.width < MIN_WIDTH:
            raise ValueError(f"width must be at least {MIN_WIDTH}, got {self.width}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FreqConfig":
        """Create FreqConfig from a YAML dict.

        Raises:
            ValueError: If the dict contains unknown keys or invalid values.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: Path) -> "FreqConfig":
        """Load report configuration from a YAML file.

        An empty file yields the default configuration.
        """
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")
        return cls.from_dict(data)

    def override(self, **values: Any) -> None:
        """Override settings, ignoring values that are None."""
        for name, value in values.items():
            if value is None:
                continue
            if not hasattr(self, name):
                raise KeyError(f"Unknown config setting: {name}")
            setattr(self, name, value)
        self.__post_init__()
