"""Loading codebooks for the command-line driver.

A codebook file is a JSON object mapping single characters to bit literals::

    {"a": "0", "b": "10", "c": "11"}

Codes can also be given inline as ``CHAR=BITS`` strings; inline codes are
applied after the file, so they override it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Optional
import json

from huffcodec.bits import BitSequence
from huffcodec.codebook import CodeBook
from huffcodec.config import Config


def load_codebook(path: Path) -> dict[str, str]:
    """Read and validate a JSON codebook file."""

    with path.open("r", encoding=Config.CODEBOOK_ENCODING) as f:
        data: Any = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Codebook file {path} must contain a JSON object, got {type(data).__name__}")
    for key, value in data.items():
        if not isinstance(value, str):
            raise ValueError(f"Code for {key!r} in {path} must be a string of 0/1, got {value!r}")
    return data


def parse_code(spec: str) -> tuple[str, str]:
    """Split an inline ``CHAR=BITS`` code.

    The character is everything before the last separator, so ``"==01"``
    assigns ``"01"`` to ``"="``.
    """

    char, sep, bits = spec.rpartition(Config.CODE_SEPARATOR)
    if not sep or len(char) != 1:
        raise ValueError(f"Invalid code {spec!r}; expected CHAR{Config.CODE_SEPARATOR}BITS")
    return char, bits


def build_codebook(path: Optional[Path], codes: Iterable[str]) -> CodeBook:
    """Build a ``CodeBook`` from an optional file plus inline codes."""

    book = CodeBook()
    if path is not None:
        for char, bits in load_codebook(path).items():
            book.add_sequence(char, BitSequence(bits))
    for spec in codes:
        char, bits = parse_code(spec)
        book.add_sequence(char, BitSequence(bits))
    if len(book) == 0:
        raise ValueError("No codes given; pass --codebook FILE and/or --code CHAR=BITS")
    return book
