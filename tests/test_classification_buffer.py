import pytest

from _quotedio.tokenizer.category import CharacterCategory as Cat
from _quotedio.tokenizer.classification_buffer import ClassificationBuffer


@pytest.fixture
def make_buffer():
    def make(chars):
        buffer = ClassificationBuffer()
        for c in chars:
            buffer.append(c)
        return buffer

    return make


def test_append_adds_char_category(make_buffer):
    buffer = make_buffer("ab")
    assert buffer.chars == ["a", "b"]
    assert buffer.categories == [Cat.CHAR, Cat.CHAR]
    assert len(buffer) == 2


def test_revise_tags_first_position_of_token(make_buffer):
    buffer = make_buffer("a||")
    buffer.revise(Cat.DELIMITER, 2)
    assert buffer.categories == [Cat.CHAR, Cat.DELIMITER, Cat.NOOP]
    assert len(buffer.chars) == len(buffer.categories)


def test_revise_longer_than_buffer(make_buffer):
    buffer = make_buffer("a")
    with pytest.raises(ValueError):
        buffer.revise(Cat.DELIMITER, 2)


def test_category_at_out_of_range(make_buffer):
    buffer = make_buffer("a")
    assert buffer.category_at(0) == Cat.CHAR
    assert buffer.category_at(-1) is None
    assert buffer.category_at(1) is None


@pytest.mark.parametrize(
    "categories, expected",
    [
        ([], False),
        ([Cat.CHAR], False),
        ([Cat.START_QUOTE], True),
        ([Cat.START_QUOTE, Cat.CHAR, Cat.DELIMITER], True),
        ([Cat.START_QUOTE, Cat.END_QUOTE], False),
        ([Cat.START_QUOTE, Cat.ESCAPED_QUOTE, Cat.NOOP], True),
        ([Cat.START_QUOTE, Cat.END_QUOTE, Cat.START_QUOTE, Cat.CHAR], True),
    ],
)
def test_in_quotes(categories, expected):
    buffer = ClassificationBuffer()
    buffer.chars = ["x"] * len(categories)
    buffer.categories = list(categories)
    assert buffer.in_quotes() == expected


def test_clear(make_buffer):
    buffer = make_buffer("abc")
    buffer.clear()
    assert len(buffer) == 0
    assert buffer.categories == []
