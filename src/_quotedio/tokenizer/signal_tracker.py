from collections import deque


class SignalTracker:
    """
    Incremental matcher for one token. Fed one character at a time, it tells
    whether the characters fed so far end with the token.

    >>> tracker = SignalTracker("ab")
    >>> [tracker.feed(c) for c in "aab"]
    [False, False, True]

    Only characters fed since the last reset are considered, so a tracker
    that is reset after firing never reports a match overlapping the
    previous one.
    """

    def __init__(self, token):
        """
        :param token: The non-empty string to track.
        """
        if not token:
            raise ValueError("Cannot track an empty token")
        self.token = token
        self._window = deque(maxlen=len(token))
        self.triggered = False

    def feed(self, char):
        """
        :param char: The next character of the input.
        :returns: True if the last len(token) characters fed equal the token.
        """
        self._window.append(char)
        self.triggered = len(self._window) == len(self.token) and all(
            a == b for a, b in zip(self._window, self.token)
        )
        return self.triggered

    def reset(self):
        self._window.clear()
        self.triggered = False

    def __repr__(self):
        return f"SignalTracker({self.token!r})"
