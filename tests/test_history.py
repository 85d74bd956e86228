import pytest

from deepdrop import calculate
from deepdrop.config import HISTORY_LENGTH
from deepdrop.history import DropHistory


def test_history_keeps_newest_first():
    history = DropHistory()
    first = calculate(1.0, 20.0)
    second = calculate(2.0, 20.0)

    assert history.record(first)
    assert history.record(second)

    assert list(history) == [second, first]
    assert history.latest is second


def test_history_is_bounded():
    history = DropHistory()
    results = [calculate(0.5 + i * 0.25, 20.0) for i in range(HISTORY_LENGTH + 3)]
    for result in results:
        history.record(result)

    assert len(history) == HISTORY_LENGTH
    assert list(history) == results[::-1][:HISTORY_LENGTH]


def test_history_skips_shallow_drops():
    history = DropHistory()
    assert not history.record(calculate(0.0, 20.0))
    # ~0.0044 m
    assert not history.record(calculate(0.03, 20.0))
    assert len(history) == 0
    assert history.latest is None


def test_history_clear():
    history = DropHistory(max_length=2)
    history.record(calculate(1.0, 20.0))
    history.clear()
    assert len(history) == 0


def test_history_rejects_zero_length():
    with pytest.raises(ValueError):
        DropHistory(max_length=0)
