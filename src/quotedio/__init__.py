import quotedio.version
from _quotedio.errors import (
    AmbiguousHeaderError,
    MalformedLineError,
    MissingInputError,
    MultipleRowsError,
    NoMatchingEntryError,
    QuotedFormatError,
    QuotedWriteError,
    SchemaError,
    SignalConfigurationError,
    UnterminatedQuoteWarning,
    WrongFileModeError,
)
from _quotedio.reading import lazy_read, read, read_array
from _quotedio.schema import RowSchema, SchemaEntry
from _quotedio.signals import CSV, CSV_CRLF, TSV, Signals
from _quotedio.splitting import (
    split_quoted,
    split_quoted_lines,
    split_quoted_multiline,
)
from _quotedio.writing import Quoting, join_quoted, write

__version__ = quotedio.version.version

__all__ = [
    "AmbiguousHeaderError",
    "CSV",
    "CSV_CRLF",
    "MalformedLineError",
    "MissingInputError",
    "MultipleRowsError",
    "NoMatchingEntryError",
    "QuotedFormatError",
    "QuotedWriteError",
    "Quoting",
    "RowSchema",
    "SchemaEntry",
    "SchemaError",
    "SignalConfigurationError",
    "Signals",
    "TSV",
    "UnterminatedQuoteWarning",
    "WrongFileModeError",
    "join_quoted",
    "lazy_read",
    "read",
    "read_array",
    "split_quoted",
    "split_quoted_lines",
    "split_quoted_multiline",
    "write",
]
