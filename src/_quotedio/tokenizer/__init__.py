"""
In this module, characters are tokenized into rows of columns. The
QuotedTokenizer feeds every character to one SignalTracker per token
(delimiter, quote and newline) and appends it to a ClassificationBuffer as an
ordinary character. When a tracker fires, the categories of the last
characters in the buffer are revised to that of the completed token: the first
character of the token gets the category, the rest become NOOP.

Whether a position is inside quotes is never stored, it is found by looking
backwards in the buffer for the closest START_QUOTE or END_QUOTE. Two
adjacent quote tokens where the first ends a quoted column are together an
ESCAPED_QUOTE, which means the column contains one quote token and continues.

Once a newline outside of quotes is found, the buffer is handed to
assemble_row which creates the list of columns.
"""

from .quoted_tokenizer import QuotedTokenizer

__all__ = ["QuotedTokenizer"]
