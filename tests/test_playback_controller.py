from __future__ import annotations

import random
from typing import List

from playdeck.audio.mock_backend import MockPlayer
from playdeck.core.collection import SongCollection
from playdeck.core.playback import PlaybackController, PlaybackState
from playdeck.core.song import Song
from playdeck.core.status import OperationStatus


class FailingPlayer:
    def __init__(self) -> None:
        self.calls: List[str] = []

    def request_playback(self, source_path: str) -> None:
        self.calls.append(source_path)
        raise OSError("player missing")


def _make_controller(titles: list[str], **kwargs) -> tuple[PlaybackController, MockPlayer]:
    songs = [Song(title=title, artist="Artist", duration_seconds=180, file_path=f"/music/{title}.mp3") for title in titles]
    player = MockPlayer()
    controller = PlaybackController(SongCollection(songs=songs), player, **kwargs)
    return controller, player


def _history(controller: PlaybackController) -> list[str]:
    return [song.title for song in controller.history]


def test_initial_state_is_stopped_without_repeat_or_shuffle() -> None:
    controller, _player = _make_controller(["A"])

    assert controller.state is PlaybackState.STOPPED
    assert controller.repeat is False
    assert controller.shuffle_enabled is False


def test_play_records_history_and_requests_path() -> None:
    controller, player = _make_controller(["A", "B"])

    outcome = controller.play()

    assert outcome.status is OperationStatus.OK
    assert outcome.song.title == "A"
    assert controller.state is PlaybackState.PLAYING
    assert _history(controller) == ["A"]
    assert player.requests == ["/music/A.mp3"]


def test_play_on_empty_playlist_is_noop() -> None:
    controller, player = _make_controller([])

    outcome = controller.play()

    assert outcome.status is OperationStatus.EMPTY
    assert controller.state is PlaybackState.STOPPED
    assert len(controller.history) == 0
    assert player.requests == []


def test_play_after_removing_last_song_is_noop() -> None:
    controller, player = _make_controller(["A"])

    controller.collection.remove("A")

    assert controller.play().status is OperationStatus.EMPTY
    assert player.requests == []


def test_next_then_replay_on_boundary() -> None:
    controller, player = _make_controller(["A", "B"])
    controller.toggle_repeat(False)

    first = controller.next()
    assert first.song.title == "B"
    assert first.advanced is True
    assert controller.current.title == "B"
    assert _history(controller) == ["B"]

    second = controller.next()
    assert second.song.title == "B"
    assert second.advanced is False
    assert controller.current.title == "B"
    assert _history(controller) == ["B", "B"]
    assert player.requests == ["/music/B.mp3", "/music/B.mp3"]


def test_example_scenario_play_next_next() -> None:
    controller, _player = _make_controller(["A", "B"])

    controller.play()
    controller.next()
    assert controller.current.title == "B"
    assert _history(controller) == ["A", "B"]

    controller.next()
    assert controller.current.title == "B"
    assert _history(controller) == ["A", "B", "B"]


def test_prev_at_head_replays_without_repeat() -> None:
    controller, _player = _make_controller(["A", "B"])

    outcome = controller.prev()

    assert outcome.advanced is False
    assert controller.current.title == "A"
    assert _history(controller) == ["A"]


def test_repeat_wraps_in_both_directions() -> None:
    controller, _player = _make_controller(["A", "B", "C"])
    controller.toggle_repeat(True)

    controller.prev()
    assert controller.current.title == "C"

    controller.next()
    assert controller.current.title == "A"


def test_history_keeps_last_ten_of_looped_playlist() -> None:
    controller, _player = _make_controller(["A", "B", "C"])
    controller.toggle_repeat(True)

    controller.play()
    for _ in range(14):
        controller.next()

    plays = [["A", "B", "C"][index % 3] for index in range(15)]
    assert len(controller.history) == 10
    assert _history(controller) == plays[-10:]


def test_history_capacity_is_configurable() -> None:
    controller, _player = _make_controller(["A"], history_capacity=2)

    for _ in range(5):
        controller.play()

    assert len(controller.history) == 2


def test_shuffle_navigation_follows_permutation_and_wraps() -> None:
    controller, _player = _make_controller(["A", "B", "C", "D"], rng=random.Random(21))
    controller.toggle_shuffle(True)
    order = [song.title for song in controller.collection.shuffled()]
    assert controller.current.title == order[0]

    for expected in order[1:]:
        assert controller.next().song.title == expected

    boundary = controller.next()
    assert boundary.advanced is False
    assert boundary.song.title == order[-1]

    controller.toggle_repeat(True)
    assert controller.next().song.title == order[0]
    assert controller.prev().song.title == order[-1]


def test_shuffle_on_then_off_resets_to_linear_head() -> None:
    controller, _player = _make_controller(["A", "B", "C", "D"], rng=random.Random(8))
    controller.next()
    controller.toggle_shuffle(True)
    controller.next()
    controller.next()

    controller.toggle_shuffle(False)

    assert controller.shuffle_enabled is False
    assert controller.current.title == "A"


def test_toggle_repeat_has_no_playback_side_effect() -> None:
    controller, player = _make_controller(["A"])

    controller.toggle_repeat(True)

    assert controller.repeat is True
    assert controller.state is PlaybackState.STOPPED
    assert player.requests == []


def test_navigation_on_empty_playlist_reports_empty() -> None:
    controller, _player = _make_controller([])

    assert controller.next().status is OperationStatus.EMPTY
    assert controller.prev().status is OperationStatus.EMPTY
    assert len(controller.history) == 0


def test_player_failure_does_not_change_outcome() -> None:
    player = FailingPlayer()
    controller = PlaybackController(SongCollection(songs=[Song(title="A", file_path="a.mp3")]), player)

    outcome = controller.play()

    assert outcome.status is OperationStatus.OK
    assert controller.state is PlaybackState.PLAYING
    assert player.calls == ["a.mp3"]
    assert _history(controller) == ["A"]


def test_controller_without_player_still_records_history() -> None:
    controller = PlaybackController(SongCollection(songs=[Song(title="A")]))

    controller.play()

    assert _history(controller) == ["A"]


def test_reset_clears_history_and_stops() -> None:
    controller, _player = _make_controller(["A"])
    controller.play()

    controller.reset()

    assert controller.state is PlaybackState.STOPPED
    assert len(controller.history) == 0
