import warnings

from _quotedio.errors import UnterminatedQuoteWarning
from _quotedio.tokenizer.category import CharacterCategory
from _quotedio.tokenizer.classification_buffer import ClassificationBuffer
from _quotedio.tokenizer.row_assembler import assemble_row
from _quotedio.tokenizer.signal_tracker import SignalTracker


class QuotedTokenizer:
    """
    Splits characters into rows of columns according to the given signals.

    >>> from _quotedio.signals import CSV
    >>> tokenizer = QuotedTokenizer(CSV)
    >>> list(tokenizer.process('"a\\nb",c\\nd,e'))
    [['a\\nb', 'c'], ['d', 'e']]

    Only the characters of the current row are kept in memory. A tokenizer
    should only process one stream of characters at the time, but can be
    reused once a stream is exhausted.
    """

    def __init__(self, signals):
        """
        :param signals: The Signals giving the delimiter, quote and newline.
        """
        self.signals = signals
        self.buffer = ClassificationBuffer()

        self.delimiter_tracker = SignalTracker(signals.delimiter)
        self.quote_tracker = SignalTracker(signals.quote)
        self.newline_tracker = SignalTracker(signals.newline)

    @property
    def trackers(self):
        return (self.delimiter_tracker, self.quote_tracker, self.newline_tracker)

    def reset(self):
        self.buffer.clear()
        self.reset_trackers()

    def reset_trackers(self):
        for tracker in self.trackers:
            tracker.reset()

    def process(self, chars):
        """
        Generate the rows in the given characters. A newline outside of
        quotes ends a row, and any characters following the last such newline
        makes up the last row.

        :param chars: Iterable of characters, eg. a string.
        :returns: Generator of rows, each row a list of column strings.
        """
        self.reset()
        for char in chars:
            category = self.process_char(char)
            if category == CharacterCategory.NEWLINE and not self.buffer.in_quotes():
                yield self.produce_row()

        if len(self.buffer) > 0:
            if self.buffer.in_quotes():
                warnings.warn(
                    "Reached end of input inside a quoted column, "
                    "the rest of the input is put in the last column.",
                    UnterminatedQuoteWarning,
                    stacklevel=2,
                )
            yield self.produce_row()

        self.reset_trackers()

    def process_char(self, char):
        """
        Add the character to the buffer and revise the categories if the
        character completes a token, in which case the trackers start over.

        :returns: The category of the completed token, or None if the
            character did not complete a token.
        """
        self.buffer.append(char)
        for tracker in self.trackers:
            tracker.feed(char)
        category = self.revise_categories()
        if category is not None:
            self.reset_trackers()
        return category

    def revise_categories(self):
        if self.delimiter_tracker.triggered:
            self.buffer.revise(CharacterCategory.DELIMITER, len(self.signals.delimiter))
            return CharacterCategory.DELIMITER
        if self.quote_tracker.triggered:
            category = self.quote_category()
            if category == CharacterCategory.ESCAPED_QUOTE:
                self.buffer.revise(category, 2 * len(self.signals.quote))
            else:
                self.buffer.revise(category, len(self.signals.quote))
            return category
        if self.newline_tracker.triggered:
            self.buffer.revise(CharacterCategory.NEWLINE, len(self.signals.newline))
            return CharacterCategory.NEWLINE
        return None

    def quote_category(self):
        """
        Category of the quote token that was just completed. A quote
        immediately following the quote that ended a quoted column is the
        second half of an escaped (doubled) quote, and the column continues.
        """
        # The doubled quote is recognised by the END_QUOTE directly before it
        # rather than by a START_QUOTE 2 quote lengths back, so "" is an empty
        # column and "a""b" gives a"b.
        if self.buffer.in_quotes():
            return CharacterCategory.END_QUOTE
        quote_length = len(self.signals.quote)
        previous_token = self.buffer.category_at(len(self.buffer) - 2 * quote_length)
        if previous_token == CharacterCategory.END_QUOTE:
            return CharacterCategory.ESCAPED_QUOTE
        return CharacterCategory.START_QUOTE

    def produce_row(self):
        row = assemble_row(self.buffer.chars, self.buffer.categories, self.signals)
        self.reset()
        return row
