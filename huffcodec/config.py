"""Centralized configuration for the codec and its command-line driver.

Defines immutable defaults for decoding policy, codebook file handling and
logging so library code and the CLI agree on behavior.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Config:
    """Immutable configuration defaults for the project."""

    # Decoding
    STRICT_DECODE: bool = True

    # Codebook files
    CODEBOOK_ENCODING: str = "utf-8"
    CODE_SEPARATOR: str = "="

    # Logging
    DEFAULT_LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "%(levelname)s %(name)s: %(message)s"


# Convenience re-exports and constants
STRICT_DECODE: bool = Config.STRICT_DECODE
LOG_LEVELS: list[str] = ["DEBUG", "INFO", "WARNING", "ERROR"]


_CONFIG_SINGLETON: Optional[Config] = None


def get_config() -> Config:
    """Return a singleton `Config` instance."""

    global _CONFIG_SINGLETON
    if _CONFIG_SINGLETON is None:
        _CONFIG_SINGLETON = Config()
    return _CONFIG_SINGLETON
