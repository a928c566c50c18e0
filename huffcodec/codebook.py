"""Character-to-code lookup used for encoding.

The codebook is an unbalanced binary search tree keyed by character. Each
entry stores the ``BitSequence`` assigned to its character. Entries are
inserted in call order with no rebalancing, so the tree shape depends on the
insertion order; only the in-order walk matters to the rest of the codec.

Example
-------
>>> from huffcodec.bits import BitSequence
>>> from huffcodec.codebook import CodeBook
>>> book = CodeBook()
>>> book.add_sequence("a", BitSequence("0"))
>>> book.add_sequence("b", BitSequence("10"))
>>> book.add_sequence("c", BitSequence("11"))
>>> str(book.encode("abc"))
'01011'
>>> book.contains_all("cab")
True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Optional
import logging

from huffcodec.bits import BitSequence
from huffcodec.errors import MissingSymbolError


_LOGGER = logging.getLogger(__name__)


@dataclass(eq=False)
class CodeEntry:
    """A node in the codebook tree.

    ``character`` is the ordering key. Entries with a smaller character live in
    the ``left`` subtree, all others in the ``right`` subtree.
    """

    character: Optional[str]
    sequence: Optional[BitSequence]
    left: Optional["CodeEntry"] = None
    right: Optional["CodeEntry"] = None


class CodeBook:
    """Binary search tree mapping single characters to bit sequences.

    Notes
    -----
    - Re-adding an existing character replaces its sequence in place; the tree
      never holds two entries with the same key.
    - ``encode`` raises ``MissingSymbolError`` for characters without an entry.
      ``get_sequence`` returns ``None`` for them instead.
    - The book is not synchronized. Populate it from one thread, then treat it
      as read-only.
    """

    def __init__(self) -> None:
        self._root: Optional[CodeEntry] = None
        self._size: int = 0

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "CodeBook":
        """Build a book from ``{character: bits}`` pairs, in the mapping's order.

        Values may be ``BitSequence`` objects or anything ``BitSequence``
        accepts (typically a ``'0'/'1'`` literal).
        """

        book = cls()
        for character, bits in mapping.items():
            seq = bits if isinstance(bits, BitSequence) else BitSequence(bits)
            book.add_sequence(character, seq)
        return book

    @property
    def root(self) -> Optional[CodeEntry]:
        return self._root

    # Mutation -----------------------------------------------------------------
    def add_sequence(self, character: str, sequence: BitSequence) -> None:
        """Insert ``character`` with its code ``sequence``.

        Standard unbalanced BST insertion: at each entry go left when
        ``character`` is strictly smaller, right otherwise, and attach the new
        entry at the first empty link.
        """

        self._validate_character(character)
        if not isinstance(sequence, BitSequence):
            raise TypeError(f"sequence must be a BitSequence, got {type(sequence).__name__}")

        new_entry = CodeEntry(character=character, sequence=sequence)
        if self._root is None:
            self._root = new_entry
            self._size = 1
            _LOGGER.debug("Added %r -> %s as root", character, sequence)
            return

        current = self._root
        while True:
            if current.character == character:
                _LOGGER.debug(
                    "Replacing code for %r: %s -> %s", character, current.sequence, sequence
                )
                current.sequence = sequence
                return
            if current.character is not None and character < current.character:
                if current.left is None:
                    current.left = new_entry
                    break
                current = current.left
            else:
                if current.right is None:
                    current.right = new_entry
                    break
                current = current.right
        self._size += 1
        _LOGGER.debug("Added %r -> %s", character, sequence)

    # Lookup -------------------------------------------------------------------
    def _search(self, character: str) -> Optional[CodeEntry]:
        current = self._root
        while current is not None and current.character != character:
            if current.character is not None and character < current.character:
                current = current.left
            else:
                current = current.right
        return current

    def contains(self, character: str) -> bool:
        """Return True if ``character`` has an entry in the book."""

        entry = self._search(character)
        return entry is not None and entry.character == character

    def contains_all(self, text: str) -> bool:
        """Return True if every character of ``text`` has an entry.

        The empty string is vacuously contained.
        """

        return all(self.contains(ch) for ch in text)

    def get_sequence(self, character: str) -> Optional[BitSequence]:
        """Return the sequence stored for ``character``, or ``None``."""

        entry = self._search(character)
        return entry.sequence if entry is not None else None

    def encode(self, text: str) -> BitSequence:
        """Concatenate the codes of every character in ``text``.

        Raises
        ------
        MissingSymbolError
            If a character of ``text`` has no entry (or no sequence).
        """

        result = BitSequence()
        for i, ch in enumerate(text):
            seq = self.get_sequence(ch)
            if seq is None:
                raise MissingSymbolError(ch, i)
            result.append(seq)
        return result

    # Traversal ----------------------------------------------------------------
    def walk(self) -> Iterator[CodeEntry]:
        """Yield entries in order: left subtree, entry, right subtree.

        Uses an explicit stack; sorted insertion degrades the tree to a chain
        as long as the book itself.
        """

        stack: list[CodeEntry] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            entry = stack.pop()
            yield entry
            current = entry.right

    def __iter__(self) -> Iterator[str]:
        for entry in self.walk():
            if entry.character is not None:
                yield entry.character

    def __len__(self) -> int:
        return self._size

    def __contains__(self, character: object) -> bool:
        return isinstance(character, str) and self.contains(character)

    # Introspection ------------------------------------------------------------
    def as_mapping(self) -> dict[str, str]:
        """Return ``{character: bit literal}`` in key order."""

        return {
            entry.character: str(entry.sequence)
            for entry in self.walk()
            if entry.character is not None and entry.sequence is not None
        }

    def is_prefix_free(self) -> bool:
        """Return True if no stored code is a prefix of another one."""

        # after sorting, a code that prefixes any other code prefixes its successor
        codes = sorted(
            (entry.sequence for entry in self.walk() if entry.sequence is not None),
            key=str,
        )
        return not any(nxt.startswith(code) for code, nxt in zip(codes, codes[1:]))

    def to_dict(self) -> dict[str, Any]:
        """Return book metadata suitable for JSON serialization."""

        lengths = [len(entry.sequence) for entry in self.walk() if entry.sequence is not None]
        return {
            "entries": len(self),
            "max_code_length": max(lengths, default=0),
            "min_code_length": min(lengths, default=0),
            "prefix_free": self.is_prefix_free(),
        }

    @staticmethod
    def _validate_character(character: str) -> None:
        if not isinstance(character, str) or len(character) != 1:
            raise ValueError(f"Expected a single character, got {character!r}")


__all__ = ["CodeBook", "CodeEntry"]
