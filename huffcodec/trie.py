"""Binary decode trie built from a codebook.

Each edge of the trie is labeled by a bit. Following the ``zero`` link
consumes a ``0`` bit and following the ``one`` link consumes a ``1`` bit.
A valid trie is a full binary tree:

- a leaf has a ``symbol`` and no children;
- an internal node has no ``symbol`` and both children.

The trie is usually derived from a ``CodeBook`` with ``DecodeTrie.from_codebook``,
which walks the book in order and ``put``s every (sequence, character) pair.
The result is a snapshot: later changes to the book are not reflected.

Example
-------
>>> from huffcodec.bits import BitSequence
>>> from huffcodec.codebook import CodeBook
>>> from huffcodec.trie import DecodeTrie
>>> book = CodeBook.from_mapping({"a": "0", "b": "10", "c": "11"})
>>> trie = DecodeTrie.from_codebook(book)
>>> trie.is_valid()
True
>>> trie.decode(BitSequence("01011"))
'abc'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
import logging

from huffcodec.bits import BitSequence
from huffcodec.codebook import CodeBook
from huffcodec.config import Config
from huffcodec.errors import MalformedTrieError, TruncatedInputError


_LOGGER = logging.getLogger(__name__)


@dataclass(eq=False)
class TrieNode:
    """A node in the decode trie.

    Leaf nodes have a non-None ``symbol`` and ``zero = one = None``.
    Internal nodes have ``symbol=None`` and two children.
    """

    symbol: Optional[str] = None
    zero: Optional["TrieNode"] = None
    one: Optional["TrieNode"] = None

    def is_leaf(self) -> bool:
        return self.symbol is not None and self.zero is None and self.one is None

    def is_valid_node(self) -> bool:
        """Check this node's shape only (children are not inspected)."""

        if self.is_leaf():
            return True
        return self.symbol is None and self.zero is not None and self.one is not None

    def child(self, bit: bool) -> Optional["TrieNode"]:
        return self.one if bit else self.zero


class DecodeTrie:
    """Bit-path trie mapping prefix-free codes back to symbols.

    Parameters
    ----------
    root:
        Existing root node. When omitted the trie starts with an empty
        internal node, which is not valid until codes are added.
    """

    def __init__(self, root: Optional[TrieNode] = None) -> None:
        self.root: TrieNode = root if root is not None else TrieNode()

    @classmethod
    def from_codebook(cls, codebook: CodeBook) -> "DecodeTrie":
        """Create a trie holding every code of ``codebook``."""

        trie = cls()
        trie.build_from(codebook)
        return trie

    # Construction -------------------------------------------------------------
    def put(self, sequence: BitSequence, symbol: str) -> None:
        """Insert ``symbol`` at the path spelled by ``sequence``.

        Missing nodes along the path are created as plain internal nodes. The
        symbol is set on the node reached after the last bit, whatever its
        current shape; ``is_valid`` reports any resulting conflict.
        """

        current = self.root
        for bit in sequence:
            if bit:
                if current.one is None:
                    current.one = TrieNode()
                current = current.one
            else:
                if current.zero is None:
                    current.zero = TrieNode()
                current = current.zero
        current.symbol = symbol

    def build_from(self, codebook: CodeBook) -> None:
        """Add every code of ``codebook`` to this trie, walking the book in order.

        Entries without a character or without a sequence are skipped.
        """

        added = 0
        for entry in codebook.walk():
            if entry.sequence is None or entry.character is None:
                continue
            self.put(entry.sequence, entry.character)
            added += 1
        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug("Built decode trie from %d codebook entries (depth %d)", added, self.depth())

    # Validation ---------------------------------------------------------------
    def is_valid(self) -> bool:
        """Return True if every node is a valid leaf or a valid internal node."""

        stack = [self.root]
        while stack:
            node = stack.pop()
            if node.is_leaf():
                continue
            if node.symbol is not None or node.zero is None or node.one is None:
                return False
            stack.append(node.one)
            stack.append(node.zero)
        return True

    # Decoding -----------------------------------------------------------------
    def decode(self, sequence: BitSequence, strict: Optional[bool] = None) -> str:
        """Decode ``sequence`` into a string, one symbol per leaf reached.

        Parameters
        ----------
        sequence:
            Bits to decode.
        strict:
            Whether input ending mid-code is an error. ``None`` uses
            ``Config.STRICT_DECODE``. When False the incomplete tail is
            dropped and a warning is logged.

        Raises
        ------
        MalformedTrieError
            If a bit leads to a missing child.
        TruncatedInputError
            If ``strict`` and the input ends before reaching a leaf.
        """

        if strict is None:
            strict = Config.STRICT_DECODE

        out: list[str] = []
        node = self.root
        pending = 0
        for offset, bit in enumerate(sequence):
            nxt = node.child(bit)
            if nxt is None:
                raise MalformedTrieError(offset, bit)
            node = nxt
            pending += 1
            if node.is_leaf():
                out.append(node.symbol)  # type: ignore[arg-type]
                node = self.root
                pending = 0

        decoded = "".join(out)
        if pending:
            if strict:
                raise TruncatedInputError(decoded, pending)
            _LOGGER.warning("Dropped %d trailing bit(s) that do not complete a code", pending)
        return decoded

    # Introspection ------------------------------------------------------------
    def depth(self) -> int:
        """Return the length of the longest root-to-node path."""

        deepest = 0
        stack: list[tuple[TrieNode, int]] = [(self.root, 0)]
        while stack:
            node, level = stack.pop()
            deepest = max(deepest, level)
            for nxt in (node.zero, node.one):
                if nxt is not None:
                    stack.append((nxt, level + 1))
        return deepest

    def codes(self) -> dict[str, BitSequence]:
        """Return ``{symbol: code}`` for every leaf, zero branch first."""

        result: dict[str, BitSequence] = {}
        stack: list[tuple[TrieNode, tuple[bool, ...]]] = [(self.root, ())]
        while stack:
            node, prefix = stack.pop()
            if node.symbol is not None:
                result[node.symbol] = BitSequence(prefix)
            # one pushed first so the zero branch is visited first
            if node.one is not None:
                stack.append((node.one, prefix + (True,)))
            if node.zero is not None:
                stack.append((node.zero, prefix + (False,)))
        return result

    def symbols(self) -> list[str]:
        return list(self.codes())


__all__ = ["DecodeTrie", "TrieNode"]
