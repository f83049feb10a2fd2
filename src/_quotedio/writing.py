import pathlib
from enum import Enum, unique
from functools import wraps

from _quotedio.errors import MissingInputError, QuotedWriteError
from _quotedio.signals import CSV


@unique
class Quoting(Enum):
    # Only quote columns that would otherwise be split differently.
    MINIMAL = 1
    ALL = 2


def takes_stream(i, mode):
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            if (
                len(args) > i
                and args[i] is not None
                and isinstance(args[i], (str, pathlib.Path))
            ):
                with open(args[i], mode, encoding="utf-8", newline="") as f:
                    return func(*args[:i], f, *args[i + 1 :], **kwargs)
            else:
                return func(*args, **kwargs)

        return wrapper

    return decorator


def needs_quoting(column, signals):
    """
    Whether the column has to be quoted in order to be read back as one
    column. Any character of any of the tokens in the column requires quotes,
    as a token can be completed by characters from two adjacent columns.
    """
    return any(
        char in column for token in signals.tokens().values() for char in token
    )


def quote_column(column, signals):
    escaped = column.replace(signals.quote, signals.quote * 2)
    return f"{signals.quote}{escaped}{signals.quote}"


def join_quoted(columns, signals=CSV, quoting=Quoting.MINIMAL):
    """
    Joins the columns into one row, quoting columns as necessary, so that
    split_quoted(join_quoted(columns, signals), signals) == columns.

    :param columns: Sequence of column strings.
    :param signals: The Signals giving the delimiter, quote and newline,
        defaults to CSV.
    :param quoting: Whether to quote all columns or only those that need it,
        defaults to Quoting.MINIMAL.
    :raises QuotedWriteError: If there are no columns, as an empty row can not
        be written.
    """
    if columns is None:
        raise MissingInputError("columns cannot be None")
    columns = list(columns)
    if not columns:
        raise QuotedWriteError("Cannot write a row with no columns.")
    for column in columns:
        if not isinstance(column, str):
            raise QuotedWriteError(f"Columns must be strings, found {column!r}")

    # An unquoted single empty column is indistinguishable from no row at all.
    if quoting == Quoting.ALL or columns == [""]:
        return signals.delimiter.join(quote_column(c, signals) for c in columns)

    return signals.delimiter.join(
        quote_column(c, signals) if needs_quoting(c, signals) else c
        for c in columns
    )


def write(filelike, rows, signals=CSV, quoting=Quoting.MINIMAL):
    """
    Writes the rows to the file, each row followed by the newline token.

    :param filelike: A file-like object, (string to path, pathlib.Path or
        opened text stream).
    :param rows: Iterable of rows, each a sequence of column strings.
    :param signals: The Signals giving the delimiter, quote and newline,
        defaults to CSV.
    :param quoting: See join_quoted.
    """
    if filelike is None:
        raise MissingInputError("filelike cannot be None")
    if rows is None:
        raise MissingInputError("rows cannot be None")
    write_rows(filelike, rows, signals, quoting)


@takes_stream(0, "w")
def write_rows(filelike, rows, signals, quoting):
    for row_number, columns in enumerate(rows):
        try:
            line = join_quoted(columns, signals, quoting)
        except QuotedWriteError as err:
            raise QuotedWriteError(f"Could not write row {row_number}: {err}") from err
        filelike.write(line)
        filelike.write(signals.newline)
