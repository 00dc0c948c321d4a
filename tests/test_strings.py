import pytest

from ascot.errors import AscotError, ErrorKind
from ascot.strings import FixedString, LongString, MiniString, ShortString


def test_create_and_read_back():
    text = MiniString("hello")
    assert str(text) == "hello"
    assert len(text) == len("hello")
    assert not text.is_empty()


def test_default_is_empty():
    assert MiniString().is_empty()
    assert str(ShortString()) == ""


@pytest.mark.parametrize(
    "cls, capacity",
    [(MiniString, 32), (ShortString, 64), (LongString, 128)],
)
def test_capacity_limits(cls, capacity):
    assert str(cls("a" * capacity)) == "a" * capacity
    with pytest.raises(AscotError) as caught:
        cls("a" * (capacity + 1))
    assert caught.value.kind is ErrorKind.FIXED_TEXT


def test_capacity_counts_utf8_bytes():
    with pytest.raises(AscotError):
        MiniString("é" * 17)
    assert str(MiniString("é" * 16)) == "é" * 16


def test_push_appends():
    text = MiniString("/route")
    text.push("/input")
    text.push_char("x")
    assert str(text) == "/route/inputx"


def test_push_overflow_leaves_content():
    text = MiniString("a" * 30)
    with pytest.raises(AscotError):
        text.push("bcd")
    assert str(text) == "a" * 30
    with pytest.raises(AscotError):
        MiniString("a" * 32).push_char("b")


def test_push_char_requires_one_character():
    with pytest.raises(ValueError):
        MiniString().push_char("ab")


def test_equality_and_hash():
    assert MiniString("x") == MiniString("x")
    assert hash(MiniString("x")) == hash(MiniString("x"))
    assert MiniString("x") != ShortString("x")
    assert {MiniString("x"), MiniString("x")} == {MiniString("x")}


def test_base_class_cannot_be_used_directly():
    with pytest.raises(TypeError):
        FixedString("x")