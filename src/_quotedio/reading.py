import pathlib
from contextlib import contextmanager

import numpy as np

from _quotedio.errors import MissingInputError, QuotedFormatError, WrongFileModeError
from _quotedio.signals import CSV
from _quotedio.splitting import split_quoted_multiline

# Number of characters read from the stream at the time.
CHUNK_SIZE = 4096


def stream_chars(stream, chunk_size=CHUNK_SIZE):
    """
    Generate the characters of a text stream, reading chunk_size characters
    at the time.

    :raises WrongFileModeError: If the stream does not give text, eg. a file
        opened in binary mode.
    """
    while True:
        chunk = stream.read(chunk_size)
        if not isinstance(chunk, str):
            raise WrongFileModeError(
                f"Expected a text stream, but reading gave {type(chunk).__name__}."
                " Open the file in text mode."
            )
        if not chunk:
            return
        yield from chunk


@contextmanager
def lazy_read(filelike, signals=CSV, encoding="utf-8"):
    """
    Lazily reads rows from a file, ie.

    >>> with lazy_read("/my/file.csv") as rows:
    ...     for row in rows:
    ...         print(row)

    :param filelike: A file-like object, (string to path, pathlib.Path or
        opened text stream). Files opened by lazy_read are opened with
        newline="" so that newline tokens are not translated.
    :param signals: The Signals giving the delimiter, quote and newline,
        defaults to CSV.
    :param encoding: The encoding used when opening a path.
    """
    if filelike is None:
        raise MissingInputError("filelike cannot be None")

    if isinstance(filelike, (str, pathlib.Path)):
        with open(filelike, "r", encoding=encoding, newline="") as file_stream:
            yield split_quoted_multiline(stream_chars(file_stream), signals)
    else:
        yield split_quoted_multiline(stream_chars(filelike), signals)


def read(filelike, signals=CSV, encoding="utf-8"):
    """
    Reads all rows of a file, see lazy_read.

    :returns: List of rows, each a list of column strings.
    """
    with lazy_read(filelike, signals, encoding) as rows:
        return list(rows)


def read_array(filelike, signals=CSV, encoding="utf-8"):
    """
    Reads all rows of a file into a two dimensional numpy array of strings,
    see lazy_read.

    :raises QuotedFormatError: If the rows do not all have the same number
        of columns.
    :returns: numpy array with shape (number of rows, number of columns).
    """
    rows = read(filelike, signals, encoding)
    if not rows:
        return np.empty((0, 0), dtype=np.str_)

    num_columns = len(rows[0])
    for row_number, row in enumerate(rows):
        if len(row) != num_columns:
            raise QuotedFormatError(
                f"Row {row_number} has {len(row)} columns, "
                f"expected {num_columns} as in the first row."
            )
    return np.array(rows, dtype=np.str_)
