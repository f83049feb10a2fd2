import pytest

from _quotedio.tokenizer.category import CharacterCategory as Cat
from _quotedio.tokenizer.row_assembler import assemble_row
from quotedio import CSV, Signals


def test_empty_row_gives_one_empty_column():
    assert assemble_row([], [], CSV) == [""]


def test_delimiters_close_columns():
    chars = list(",a,")
    categories = [Cat.DELIMITER, Cat.CHAR, Cat.DELIMITER]
    assert assemble_row(chars, categories, CSV) == ["", "a", ""]


def test_delimiter_in_quotes_is_data():
    chars = list('"a,b"')
    categories = [Cat.START_QUOTE, Cat.CHAR, Cat.DELIMITER, Cat.CHAR, Cat.END_QUOTE]
    assert assemble_row(chars, categories, CSV) == ["a,b"]


def test_escaped_quote_gives_one_quote():
    chars = list('"a""b"')
    categories = [
        Cat.START_QUOTE,
        Cat.CHAR,
        Cat.ESCAPED_QUOTE,
        Cat.NOOP,
        Cat.CHAR,
        Cat.END_QUOTE,
    ]
    assert assemble_row(chars, categories, CSV) == ['a"b']


def test_newline_in_quotes_is_data():
    chars = list('"\n"')
    categories = [Cat.START_QUOTE, Cat.NEWLINE, Cat.END_QUOTE]
    assert assemble_row(chars, categories, CSV) == ["\n"]


def test_newline_outside_quotes_is_dropped():
    assert assemble_row(["a", "\n"], [Cat.CHAR, Cat.NEWLINE], CSV) == ["a"]


def test_multi_character_tokens_are_written_in_full():
    signals = Signals(delimiter="||", quote="'", newline="\r\n")
    chars = list("'a||b\r\n'")
    categories = [
        Cat.START_QUOTE,
        Cat.CHAR,
        Cat.DELIMITER,
        Cat.NOOP,
        Cat.CHAR,
        Cat.NEWLINE,
        Cat.NOOP,
        Cat.END_QUOTE,
    ]
    assert assemble_row(chars, categories, signals) == ["a||b\r\n"]


def test_length_mismatch():
    with pytest.raises(ValueError, match="categories"):
        assemble_row(["a"], [], CSV)
