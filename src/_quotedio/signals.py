from dataclasses import dataclass
from itertools import permutations

from _quotedio.errors import SignalConfigurationError


@dataclass(frozen=True)
class Signals:
    """
    The tokens that dictate how characters are split into rows and columns.

    >>> Signals(delimiter=";", quote="'", newline="\\r\\n")
    Signals(delimiter=';', quote="'", newline='\\r\\n')

    Each token may be more than one character long. If two tokens complete
    at the same character, the delimiter wins over the quote which wins over
    the newline.
    """

    delimiter: str = ","
    quote: str = '"'
    newline: str = "\n"

    def __post_init__(self):
        for name, token in self.tokens().items():
            if not isinstance(token, str):
                raise SignalConfigurationError(
                    f"{name} token must be a string, got {token!r}"
                )
            if len(token) == 0:
                raise SignalConfigurationError(f"{name} token cannot be empty")

        for (name1, token1), (name2, token2) in permutations(
            self.tokens().items(), 2
        ):
            if token2.startswith(token1):
                raise SignalConfigurationError(
                    f"{name1} token {token1!r} is a prefix of "
                    f"{name2} token {token2!r}"
                )

    def tokens(self):
        return {
            "delimiter": self.delimiter,
            "quote": self.quote,
            "newline": self.newline,
        }


CSV = Signals()
CSV_CRLF = Signals(newline="\r\n")
TSV = Signals(delimiter="\t")
