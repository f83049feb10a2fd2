class SignalConfigurationError(ValueError):
    """
    Raised when the delimiter, quote and newline tokens can not be used
    together, ie. one of them is empty or one is a prefix of another.
    """

    pass


class MissingInputError(TypeError):
    """
    Raised when None is given where a sequence of characters (or a sequence of
    lines) is required.
    """

    pass


class MultipleRowsError(Exception):
    """
    Raised by split_quoted when the characters contain more than one row,
    ie. there is a newline outside of quotes.
    """

    pass


class MalformedLineError(Exception):
    """
    Raised by split_quoted_lines when one of the given lines contains a
    newline outside of quotes.
    """

    pass


class QuotedFormatError(ValueError):
    """
    Raised when reading rows that do not have the expected shape.
    """

    pass


class WrongFileModeError(QuotedFormatError):
    """
    Raised when reading from a stream opened in binary mode, rows can only be
    read from text streams.
    """

    pass


class QuotedWriteError(Exception):
    """
    Raised when a row can not be written, eg. it has no columns.
    """

    pass


class SchemaError(ValueError):
    """
    Raised when a RowSchema or SchemaEntry is invalid.
    """

    pass


class AmbiguousHeaderError(SchemaError):
    """
    Raised when adding a schema entry whose header is a prefix of (or has as
    prefix) the header of an entry already in the schema.
    """

    pass


class NoMatchingEntryError(SchemaError):
    """
    Raised when a row does not start with the header of any schema entry.
    """

    pass


class UnterminatedQuoteWarning(UserWarning):
    """
    Emitted when the input ends while inside a quoted column. The remaining
    characters are still returned as part of the last column.
    """

    pass
