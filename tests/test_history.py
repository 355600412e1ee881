import pytest

from playdeck.core.history import DEFAULT_HISTORY_CAPACITY, HistoryBuffer
from playdeck.core.song import Song


def _song(title: str) -> Song:
    return Song(title=title, duration_seconds=1)


def test_default_capacity_is_ten() -> None:
    assert HistoryBuffer().capacity == DEFAULT_HISTORY_CAPACITY == 10


def test_oldest_entry_is_evicted_first() -> None:
    history = HistoryBuffer(capacity=3)

    for title in ["a", "b", "c", "d", "e"]:
        history.record(_song(title))

    assert len(history) == 3
    assert [song.title for song in history] == ["c", "d", "e"]


def test_entries_are_snapshots() -> None:
    history = HistoryBuffer()
    song = _song("a")

    history.record(song)
    song.favorite = True
    song.title = "changed"

    recorded = history.entries()[0]
    assert recorded.title == "a"
    assert recorded.favorite is False


def test_clear_and_invalid_capacity() -> None:
    history = HistoryBuffer()
    history.record(_song("a"))
    history.clear()
    assert len(history) == 0

    with pytest.raises(ValueError):
        HistoryBuffer(capacity=0)
