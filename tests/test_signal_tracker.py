import hypothesis.strategies as st
import pytest
from hypothesis import given

from _quotedio.tokenizer.signal_tracker import SignalTracker


def feed_all(tracker, chars):
    return [tracker.feed(c) for c in chars]


def test_single_character_token():
    tracker = SignalTracker(",")
    assert feed_all(tracker, "a,b,") == [False, True, False, True]


def test_multi_character_token():
    tracker = SignalTracker("||")
    assert feed_all(tracker, "a||b") == [False, False, True, False]
    assert not tracker.triggered


def test_overlapping_partial_match():
    tracker = SignalTracker("aab")
    assert feed_all(tracker, "aaab") == [False, False, False, True]


def test_comparison_is_case_sensitive():
    tracker = SignalTracker("ab")
    assert feed_all(tracker, "aB") == [False, False]


def test_reset_drops_partial_match():
    tracker = SignalTracker("ab")
    tracker.feed("a")
    tracker.reset()
    assert not tracker.feed("b")


def test_reset_after_trigger_prevents_overlap():
    tracker = SignalTracker("aa")
    assert tracker.feed("a") is False
    assert tracker.feed("a") is True
    tracker.reset()
    assert tracker.feed("a") is False
    assert tracker.feed("a") is True


def test_empty_token():
    with pytest.raises(ValueError):
        SignalTracker("")


@given(st.text(min_size=1, max_size=4), st.text(max_size=20))
def test_triggers_exactly_when_token_ends(token, chars):
    tracker = SignalTracker(token)
    for i, c in enumerate(chars):
        fed = chars[: i + 1]
        assert tracker.feed(c) == fed.endswith(token)
