import pytest

from huffcodec.bits import BitSequence


def test_empty_sequence():
    """An empty sequence has no bits and an empty literal."""

    seq = BitSequence()
    assert len(seq) == 0
    assert list(seq) == []
    assert str(seq) == ""


def test_literal_parsing():
    """A '0'/'1' literal maps to bools in order."""

    assert list(BitSequence("0110")) == [False, True, True, False]


def test_literal_rejects_other_characters():
    """Literals may only contain 0 and 1."""

    with pytest.raises(ValueError):
        BitSequence("01a")


def test_iterable_of_ints_and_bools():
    """Iterables of 0/1 ints and bools are accepted."""

    assert BitSequence([1, 0, True, False]) == BitSequence("1010")


def test_iterable_rejects_out_of_range():
    """Integers other than 0 and 1 are rejected."""

    with pytest.raises(ValueError):
        BitSequence([0, 2])


def test_append_concatenates_and_copies():
    """Appending copies bits; later changes to the argument do not leak."""

    a = BitSequence("10")
    b = BitSequence("11")
    a.append(b)
    b.append(BitSequence("0"))
    assert str(a) == "1011"
    assert str(b) == "110"


def test_append_self_doubles():
    """Appending a sequence to itself doubles it."""

    seq = BitSequence("01")
    seq.append(seq)
    assert str(seq) == "0101"


def test_append_requires_bit_sequence():
    """Only BitSequence values can be appended."""

    with pytest.raises(TypeError):
        BitSequence("0").append("1")  # type: ignore[arg-type]


def test_iteration_is_restartable():
    """Iterating twice yields the same bits."""

    seq = BitSequence("101")
    assert list(seq) == list(seq)


def test_equality_is_structural():
    """Equality compares bits, not identity."""

    assert BitSequence("010") == BitSequence("010")
    assert BitSequence("010") != BitSequence("01")
    assert BitSequence("0") != "0"


def test_startswith():
    """Prefix test covers empty, equal, and longer prefixes."""

    seq = BitSequence("1101")
    assert seq.startswith(BitSequence("11"))
    assert seq.startswith(BitSequence("1101"))
    assert seq.startswith(BitSequence())
    assert not seq.startswith(BitSequence("10"))
    assert not seq.startswith(BitSequence("11010"))


def test_repr_and_copy():
    """copy() is independent and repr shows the literal."""

    seq = BitSequence("01")
    dup = seq.copy()
    dup.append(BitSequence("1"))
    assert repr(seq) == "BitSequence('01')"
    assert str(dup) == "011"
