"""Exception types raised by the codec.

All codec failures derive from ``HuffmanCodecError`` so callers (and the CLI)
can catch them in one place. Each concrete error also derives from the
closest built-in so generic handlers keep working.
"""

from __future__ import annotations


class HuffmanCodecError(Exception):
    """Base class for codec errors."""


class MissingSymbolError(HuffmanCodecError, KeyError):
    """A character to encode has no entry in the codebook."""

    def __init__(self, character: str, position: int | None = None) -> None:
        self.character = character
        self.position = position
        where = f" at index {position}" if position is not None else ""
        super().__init__(f"Character {character!r}{where} is not in the codebook")

    def __str__(self) -> str:
        # KeyError would repr() the message otherwise
        return str(self.args[0])


class MalformedTrieError(HuffmanCodecError, ValueError):
    """Decoding followed a branch that does not exist in the trie."""

    def __init__(self, offset: int, bit: bool) -> None:
        self.offset = offset
        self.bit = bit
        super().__init__(
            f"No {'one' if bit else 'zero'} branch for bit {int(bit)} at offset {offset}; "
            "the decode trie is not a full binary tree"
        )


class TruncatedInputError(HuffmanCodecError, ValueError):
    """The input ended in the middle of a code."""

    def __init__(self, decoded: str, dangling_bits: int) -> None:
        self.decoded = decoded
        self.dangling_bits = dangling_bits
        super().__init__(
            f"Input ended {dangling_bits} bit(s) into an incomplete code "
            f"after decoding {len(decoded)} symbol(s)"
        )


__all__ = [
    "HuffmanCodecError",
    "MissingSymbolError",
    "MalformedTrieError",
    "TruncatedInputError",
]
