from __future__ import annotations

import pytest

from engine.playback.controller import PlaybackController, PlaybackMode
from engine.playback.handle import AnimationHandle, EngineUnavailableError
from engine.timeline.intervals import Interval, pack_rows
from tests._utils.dummies import FakeHandle


def _controller(handle: FakeHandle, duration: float = 800.0, width: float = 200.0) -> PlaybackController:
    return PlaybackController(handle, duration=duration, bar_width=width)


def test_fake_handle_satisfies_protocol(handle: FakeHandle) -> None:
    assert isinstance(handle, AnimationHandle)


def test_initial_state(handle: FakeHandle) -> None:
    c = _controller(handle)
    s = c.state
    assert (s.mode, s.current_time, s.dragging) == (PlaybackMode.IDLE, 0.0, False)


def test_seek_at_half_of_bar_issues_half_duration(handle: FakeHandle) -> None:
    c = _controller(handle, duration=800.0, width=200.0)
    c.on_pointer_down(100.0)
    assert handle.calls == [("pause",), ("seek", 400.0)]
    assert c.current_time == 400.0


def test_pointer_down_pauses_before_seeking_and_enters_seeking(handle: FakeHandle) -> None:
    c = _controller(handle)
    c.play()
    c.on_pointer_down(50.0)
    assert handle.names() == ["restart", "pause", "seek"]
    assert c.mode is PlaybackMode.SEEKING
    assert c.dragging and c.is_seeking


@pytest.mark.parametrize("x, expected", [(-30.0, 0.0), (0.0, 0.0), (250.0, 800.0), (1e9, 800.0)])
def test_seek_is_clamped_to_timeline(handle: FakeHandle, x: float, expected: float) -> None:
    c = _controller(handle, duration=800.0, width=200.0)
    c.on_pointer_down(x)
    assert handle.calls[-1] == ("seek", expected)


def test_drag_reseeks_only_while_seeking(handle: FakeHandle) -> None:
    c = _controller(handle)
    c.on_pointer_move(10.0)  # 押下前は無視
    assert handle.calls == []

    c.on_pointer_down(0.0)
    c.on_pointer_move(50.0)
    c.on_pointer_move(150.0)
    assert [t for name, *t in handle.calls if name == "seek"] == [[0.0], [200.0], [600.0]]

    c.on_pointer_up()
    c.on_pointer_move(200.0)
    assert handle.names().count("seek") == 3


def test_pointer_up_does_not_resume(handle: FakeHandle) -> None:
    c = _controller(handle)
    c.play()
    c.on_pointer_down(100.0)
    c.on_pointer_up()
    assert c.mode is PlaybackMode.PAUSED
    assert not c.dragging
    assert handle.names() == ["restart", "pause", "seek"]


def test_pointer_up_without_down_is_noop(handle: FakeHandle) -> None:
    c = _controller(handle)
    c.on_pointer_up()
    assert c.mode is PlaybackMode.IDLE
    assert handle.calls == []


def test_play_restarts_only_when_not_playing(handle: FakeHandle) -> None:
    c = _controller(handle)
    c.play()
    c.play()
    assert handle.names() == ["restart"]
    c.pause()
    c.play()
    assert handle.names() == ["restart", "pause", "restart"]
    assert c.mode is PlaybackMode.PLAYING


def test_pause_transitions_and_always_forwards(handle: FakeHandle) -> None:
    c = _controller(handle)
    c.pause()
    assert c.mode is PlaybackMode.PAUSED
    assert handle.names() == ["pause"]


def test_reverse_keeps_mode(handle: FakeHandle) -> None:
    c = _controller(handle)
    c.play()
    c.reverse()
    assert c.mode is PlaybackMode.PLAYING
    c.pause()
    c.reverse()
    assert c.mode is PlaybackMode.PAUSED
    assert handle.names().count("reverse") == 2


def test_play_during_drag_ends_seeking(handle: FakeHandle) -> None:
    c = _controller(handle)
    c.on_pointer_down(10.0)
    c.play()
    assert c.mode is PlaybackMode.PLAYING and not c.dragging
    c.on_pointer_move(100.0)
    assert handle.names().count("seek") == 1


def test_state_is_a_copy(handle: FakeHandle) -> None:
    c = _controller(handle)
    snapshot = c.state
    snapshot.mode = PlaybackMode.PLAYING
    snapshot.current_time = 123.0
    assert c.mode is PlaybackMode.IDLE and c.current_time == 0.0


def test_from_assignments_uses_max_end() -> None:
    handle = FakeHandle()
    assignments = pack_rows([Interval(0, 300), Interval(100, 400), Interval(400, 600)])
    c = PlaybackController.from_assignments(handle, assignments, bar_width=300.0)
    assert c.duration == 600.0
    c.on_pointer_down(150.0)
    assert handle.calls[-1] == ("seek", 300.0)


def test_zero_width_bar_seeks_to_start(handle: FakeHandle) -> None:
    c = _controller(handle, width=0.0)
    c.on_pointer_down(40.0)
    assert handle.calls[-1] == ("seek", 0.0)
    c.set_bar_width(80.0)
    c.on_pointer_move(40.0)
    assert handle.calls[-1] == ("seek", 400.0)


def test_progress_and_sample(handle: FakeHandle) -> None:
    c = _controller(handle, duration=800.0)
    assert c.progress() == 0.0
    handle.seek(200.0)
    assert c.sample() == 0.25
    assert c.current_time == 200.0
    empty = PlaybackController(handle, duration=0.0, bar_width=100.0)
    assert empty.sample() == 0.0


@pytest.mark.parametrize(
    "op",
    [
        lambda c: c.play(),
        lambda c: c.pause(),
        lambda c: c.reverse(),
        lambda c: c.on_pointer_down(1.0),
        lambda c: c.sample(),
    ],
)
def test_missing_engine_is_reported(op) -> None:
    c = PlaybackController(None, duration=100.0, bar_width=100.0)
    with pytest.raises(EngineUnavailableError):
        op(c)


def test_teardown_drops_handle_and_is_idempotent(handle: FakeHandle) -> None:
    c = _controller(handle)
    c.play()
    c.teardown()
    c.teardown()
    assert not c.has_engine
    assert c.mode is PlaybackMode.IDLE
    with pytest.raises(EngineUnavailableError) as excinfo:
        c.play()
    assert excinfo.value.operation == "play"
    assert isinstance(excinfo.value, RuntimeError)
