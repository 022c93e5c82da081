import pytest

from ticker import Ticker


def test_fires_once_per_whole_interval():
    ticker = Ticker()
    calls = []
    ticker.schedule("t", 1.0, calls.append)
    ticker.advance(0.5)
    assert calls == []
    ticker.advance(0.5)
    assert calls == [1.0]
    ticker.advance(2.25)
    assert len(calls) == 3


def test_cancelled_timer_never_fires_again():
    ticker = Ticker()
    calls = []
    handle = ticker.schedule("t", 0.1, calls.append)
    ticker.advance(0.1)
    handle.cancel()
    ticker.advance(5.0)
    assert len(calls) == 1
    assert ticker.timers == []


def test_cancel_from_another_callback_in_same_advance():
    ticker = Ticker()
    calls = []
    victim = None

    def killer(dt):
        victim.cancel()

    ticker.schedule("killer", 0.1, killer)
    victim = ticker.schedule("victim", 0.1, calls.append)
    ticker.advance(0.1)
    assert calls == []


def test_timer_can_cancel_itself_mid_catchup():
    ticker = Ticker()
    calls = []

    def once(dt):
        calls.append(dt)
        handle.cancel()

    handle = ticker.schedule("once", 0.1, once)
    ticker.advance(1.0)
    assert len(calls) == 1


def test_catchup_is_capped():
    ticker = Ticker(max_catchup=5)
    calls = []
    ticker.schedule("t", 0.1, calls.append)
    ticker.advance(100.0)
    assert len(calls) == 5
    # Backlog was dropped, not carried over
    ticker.advance(0.05)
    assert len(calls) == 5


def test_cancel_all():
    ticker = Ticker()
    calls = []
    ticker.schedule("a", 0.1, calls.append)
    ticker.schedule("b", 0.2, calls.append)
    ticker.cancel_all()
    ticker.advance(1.0)
    assert calls == []


def test_bad_arguments():
    ticker = Ticker()
    with pytest.raises(ValueError):
        ticker.schedule("t", 0, print)
    with pytest.raises(ValueError):
        ticker.advance(-0.1)
