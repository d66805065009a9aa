import pytest

from pokefight.timing import Stopwatch


def test_starts_at_zero():
    assert Stopwatch().elapsed == 0.0


def test_tick_accumulates():
    watch = Stopwatch()
    watch.tick(0.25)
    assert watch.tick(0.5) == pytest.approx(0.75)
    assert watch.elapsed == pytest.approx(0.75)


def test_restart_returns_elapsed_and_resets():
    watch = Stopwatch()
    watch.tick(3.0)
    assert watch.restart() == pytest.approx(3.0)
    assert watch.elapsed == 0.0


def test_negative_tick_rejected():
    watch = Stopwatch()
    with pytest.raises(ValueError):
        watch.tick(-1.0)


def test_negative_initial_rejected():
    with pytest.raises(ValueError):
        Stopwatch(-0.5)


def test_initial_value_kept():
    assert Stopwatch(2.0).elapsed == 2.0