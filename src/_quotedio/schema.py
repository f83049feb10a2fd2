"""
A RowSchema dispatches rows to one of several row formats by the header that
the row starts with, eg. a file where rows starting with "H," are headers and
rows starting with "D," are data.
"""

from dataclasses import dataclass

from _quotedio.errors import (
    AmbiguousHeaderError,
    MalformedLineError,
    MissingInputError,
    MultipleRowsError,
    NoMatchingEntryError,
    SchemaError,
)
from _quotedio.signals import CSV, Signals
from _quotedio.splitting import split_quoted


@dataclass(frozen=True)
class SchemaEntry:
    """
    A row format in a RowSchema.

    :param header: The literal text rows of this format start with.
    :param name: Name of the row format.
    :param signals: The Signals used to split the rest of the row.
    """

    header: str
    name: str
    signals: Signals = CSV

    def __post_init__(self):
        if not self.header:
            raise SchemaError(f"Header of schema entry {self.name!r} is empty")


class RowSchema:
    """
    Registry of SchemaEntry where no header starts with any other header, so
    that each row matches at most one entry.

    >>> schema = RowSchema()
    >>> schema.add_entry(SchemaEntry("H,", "header"))
    >>> schema.add_entry(SchemaEntry("D,", "data"))
    >>> list(schema.split(["H,a,b", "D,1,2"]))
    [('header', ['a', 'b']), ('data', ['1', '2'])]
    """

    def __init__(self, entries=()):
        self._entries = {}
        for entry in entries:
            self.add_entry(entry)

    def add_entry(self, entry):
        """
        :raises AmbiguousHeaderError: If the header of entry starts with the
            header of an existing entry or vice versa.
        """
        if entry is None:
            raise MissingInputError("entry cannot be None")

        for existing in self._entries.values():
            if existing.header.startswith(entry.header) or entry.header.startswith(
                existing.header
            ):
                raise AmbiguousHeaderError(
                    f"Header {entry.header!r} of {entry.name!r} collides with "
                    f"header {existing.header!r} of {existing.name!r}"
                )
        self._entries[entry.header] = entry

    def __getitem__(self, header):
        return self._entries[header]

    def __contains__(self, header):
        return header in self._entries

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries.values())

    def entry_for_row(self, row):
        """
        :param row: The raw text of a row.
        :returns: The entry whose header the row starts with.
        :raises NoMatchingEntryError: If no entry matches the row.
        """
        if row is None:
            raise MissingInputError("row cannot be None")
        for entry in self._entries.values():
            if row.startswith(entry.header):
                return entry
        raise NoMatchingEntryError(f"No schema entry matches row {row!r}")

    def split(self, lines):
        """
        Splits each line with the signals of its matching entry.

        :param lines: Iterable of lines (strings) without unquoted newlines.
        :returns: Iterator of (entry name, columns) where the columns
            exclude the header.
        """
        if lines is None:
            raise MissingInputError("lines cannot be None")
        return self._split(lines)

    def _split(self, lines):
        for line_number, line in enumerate(lines):
            entry = self.entry_for_row(line)
            try:
                columns = split_quoted(line[len(entry.header) :], entry.signals)
            except MultipleRowsError as err:
                raise MalformedLineError(
                    f"Line {line_number} contains more than one row: {err}"
                ) from err
            yield entry.name, columns
