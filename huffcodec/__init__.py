"""
huffcodec: Huffman-style prefix code encoding and decoding.

Pairs a character-keyed codebook (for encoding) with a bit-path decode trie
derived from it (for decoding).
"""

__all__ = [
    "BitSequence",
    "CodeBook",
    "CodeEntry",
    "DecodeTrie",
    "TrieNode",
    "Config",
    "get_config",
    "HuffmanCodecError",
    "MissingSymbolError",
    "MalformedTrieError",
    "TruncatedInputError",
    "__version__",
]

__version__ = "0.1.0"

from huffcodec.bits import BitSequence
from huffcodec.codebook import CodeBook, CodeEntry
from huffcodec.config import Config, get_config
from huffcodec.errors import (
    HuffmanCodecError,
    MissingSymbolError,
    MalformedTrieError,
    TruncatedInputError,
)
from huffcodec.trie import DecodeTrie, TrieNode
