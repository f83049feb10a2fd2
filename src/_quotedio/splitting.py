"""
Splitting of quoted delimited characters, either as a single row, as many rows
separated by newlines, or as a sequence of lines already split by the caller.
"""

from itertools import islice

from _quotedio.errors import MalformedLineError, MissingInputError, MultipleRowsError
from _quotedio.signals import CSV
from _quotedio.tokenizer import QuotedTokenizer


def check_not_none(value, name):
    if value is None:
        raise MissingInputError(f"{name} cannot be None")


def split_quoted(chars, signals=CSV):
    """
    Splits a delimited string while allowing the delimiter to occur within
    quoted columns, ie. split_quoted('a,"b,c",d') == ["a", "b,c", "d"].

    :param chars: Iterable of characters making up exactly one row.
    :param signals: The Signals giving the delimiter, quote and newline,
        defaults to CSV.
    :returns: The list of columns, empty if chars is empty.
    :raises MultipleRowsError: If chars contains a newline outside of quotes.
    """
    check_not_none(chars, "chars")
    return single_row(QuotedTokenizer(signals), chars)


def split_quoted_multiline(chars, signals=CSV):
    """
    Splits delimited characters into rows, where a newline outside of quotes
    starts a new row.

    >>> list(split_quoted_multiline('"a\\nb",c\\nd,e'))
    [['a\\nb', 'c'], ['d', 'e']]

    :param chars: Iterable of characters, can be an iterator over a large
        input as only the current row is kept in memory.
    :param signals: The Signals giving the delimiter, quote and newline,
        defaults to CSV.
    :returns: Iterator of rows, each row a list of columns.
    """
    check_not_none(chars, "chars")
    return QuotedTokenizer(signals).process(chars)


def split_quoted_lines(lines, signals=CSV):
    """
    Splits each of the given lines as one row. Any newline in a line has to
    be quoted, as the lines are assumed to be split already.

    :param lines: Iterable of lines, each an iterable of characters.
    :param signals: The Signals giving the delimiter, quote and newline,
        defaults to CSV.
    :returns: Iterator with one row for each line, an empty line gives
        an empty row.
    :raises MalformedLineError: If one of the lines contains a newline
        outside of quotes.
    """
    check_not_none(lines, "lines")
    return _split_lines(QuotedTokenizer(signals), lines)


def _split_lines(tokenizer, lines):
    for line_number, line in enumerate(lines):
        if line is None:
            raise MissingInputError(f"Line {line_number} is None")
        try:
            row = single_row(tokenizer, line)
        except MultipleRowsError as err:
            raise MalformedLineError(
                f"Line {line_number} contains more than one row: {err}"
            ) from err
        yield row


def single_row(tokenizer, chars):
    rows = list(islice(tokenizer.process(chars), 2))
    if len(rows) > 1:
        raise MultipleRowsError(
            "Found newline "
            f"{tokenizer.signals.newline!r} outside of quotes in a single row."
        )
    if not rows:
        return []
    return rows[0]
