"""Bit sequence value type used by the codebook and the decode trie.

A ``BitSequence`` is an ordered, finite run of binary digits. It supports the
handful of operations the codec needs: construction from a ``'0'/'1'``
literal, appending another sequence, ordered iteration over ``bool`` bits,
length and structural equality.

Example
-------
>>> from huffcodec.bits import BitSequence
>>> seq = BitSequence("10")
>>> seq.append(BitSequence("11"))
>>> str(seq)
'1011'
>>> list(BitSequence("01"))
[False, True]
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Union


BitsLike = Union[str, Iterable[Union[bool, int]]]


class BitSequence:
    """Mutable, ordered sequence of bits.

    Parameters
    ----------
    bits:
        ``None`` for an empty sequence, a literal string made of ``'0'`` and
        ``'1'``, or any iterable of bools / 0 / 1 ints.
    """

    __slots__ = ("_bits",)

    def __init__(self, bits: Optional[BitsLike] = None) -> None:
        self._bits: list[bool] = []
        if bits is None:
            return
        if isinstance(bits, str):
            for i, ch in enumerate(bits):
                if ch == "0":
                    self._bits.append(False)
                elif ch == "1":
                    self._bits.append(True)
                else:
                    raise ValueError(
                        f"Invalid bit literal character {ch!r} at index {i}; expected '0' or '1'."
                    )
            return
        for i, value in enumerate(bits):
            if value is True or value is False:
                self._bits.append(value)
            elif value in (0, 1):
                self._bits.append(bool(value))
            else:
                raise ValueError(f"Invalid bit value {value!r} at index {i}; expected 0 or 1.")

    def append(self, other: "BitSequence") -> None:
        """Append every bit of ``other`` to this sequence."""

        if not isinstance(other, BitSequence):
            raise TypeError(f"Can only append a BitSequence, got {type(other).__name__}")
        # list(...) so that seq.append(seq) doubles instead of looping forever
        self._bits.extend(list(other._bits))

    def copy(self) -> "BitSequence":
        return BitSequence(self._bits)

    def startswith(self, prefix: "BitSequence") -> bool:
        """Return True if ``prefix`` is a (possibly equal) prefix of this sequence."""

        n = len(prefix)
        return n <= len(self._bits) and self._bits[:n] == prefix._bits

    def __iter__(self) -> Iterator[bool]:
        return iter(self._bits)

    def __len__(self) -> int:
        return len(self._bits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitSequence):
            return NotImplemented
        return self._bits == other._bits

    def __str__(self) -> str:
        return "".join("1" if bit else "0" for bit in self._bits)

    def __repr__(self) -> str:
        return f"BitSequence({str(self)!r})"


__all__ = ["BitSequence", "BitsLike"]
