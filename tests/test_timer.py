import pytest

from retroarcade.timer import Timer


def timer_at(now):
    """A timer driven by a settable clock; returns the timer and the clock cell."""
    times = [now]
    return Timer(clock=lambda: times[0]), times


@pytest.mark.parametrize(
    "later, expected",
    [(10.5, False), (10.999, False), (11.0, True), (12.0, True)],
)
def test_done_once_lifetime_has_passed(later, expected):
    timer, times = timer_at(10.0)
    timer.start(1.0)
    times[0] = later
    assert timer.done() == expected


def test_elapsed_tracks_clock():
    timer, times = timer_at(4.0)
    timer.start(2.0)
    times[0] = 5.25
    assert timer.elapsed() == pytest.approx(1.25)


def test_restart_resets_start_time():
    timer, times = timer_at(0.0)
    timer.start(1.0)
    times[0] = 3.0
    assert timer.done()
    timer.start(1.0)
    assert not timer.done()
    assert timer.elapsed() == 0.0
    assert (timer.start_time, timer.lifetime) == (3.0, 1.0)


def test_unstarted_timer_is_done():
    timer, _ = timer_at(0.0)
    assert timer.done()