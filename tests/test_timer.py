"""Tests for the round countdown."""

import pytest

from quizwordz.engine import RoundTimer, Scheduler


@pytest.fixture
def expired():
    return []


@pytest.fixture
def timer(scheduler, expired):
    timer = RoundTimer(scheduler=scheduler, limit_seconds=240, on_expire=lambda: expired.append(True))
    timer.start()
    return timer


class TestTicking:
    """Test counting and expiry."""

    def test_one_tick_per_second(self, timer, scheduler):
        scheduler.advance(0.5)
        assert timer.elapsed_seconds == 0
        scheduler.advance(0.5)
        assert timer.elapsed_seconds == 1
        scheduler.advance(10)
        assert timer.elapsed_seconds == 11
        assert timer.time_left == 229

    def test_expires_after_limit(self, timer, scheduler, expired):
        scheduler.advance(239)
        assert timer.state == "RUNNING"
        assert expired == []
        scheduler.advance(1)
        assert timer.state == "EXPIRED"
        assert timer.elapsed_seconds == 240
        assert expired == [True]

    def test_frozen_after_expiry(self, timer, scheduler, expired):
        scheduler.advance(500)
        assert timer.elapsed_seconds == 240
        assert expired == [True]
        assert scheduler.pending == []

    def test_short_limit(self, scheduler):
        timer = RoundTimer(scheduler=scheduler, limit_seconds=1)
        timer.start()
        scheduler.advance(1)
        assert timer.state == "EXPIRED"
        assert timer.elapsed_seconds == 1


class TestPause:
    """Test pausing and resuming."""

    def test_pause_stops_ticks(self, timer, scheduler):
        scheduler.advance(5)
        assert timer.pause() is True
        scheduler.advance(100)
        assert timer.elapsed_seconds == 5
        assert timer.state == "PAUSED"

    def test_pause_delays_expiry_by_pause_length(self, timer, scheduler):
        scheduler.advance(10)
        timer.pause()
        scheduler.advance(30)
        timer.resume()
        scheduler.advance(229)
        assert timer.state == "RUNNING"
        assert timer.elapsed_seconds == 239
        scheduler.advance(1)
        assert timer.state == "EXPIRED"
        assert scheduler.now == 270

    def test_pause_mid_second_keeps_partial_tick(self, scheduler, expired):
        """Half a second before the pause still counts after resuming."""
        timer = RoundTimer(scheduler=scheduler, limit_seconds=10, on_expire=lambda: expired.append(True))
        timer.start()
        scheduler.advance(0.5)
        timer.pause()
        scheduler.advance(3)
        timer.resume()
        scheduler.advance(0.5)
        assert timer.elapsed_seconds == 1
        scheduler.advance(9)
        assert timer.state == "EXPIRED"
        assert scheduler.now == 13
        assert expired == [True]

    def test_repeated_mid_second_pauses_lose_no_time(self, timer, scheduler):
        for _ in range(4):
            scheduler.advance(0.25)
            timer.pause()
            scheduler.advance(5)
            timer.resume()
        assert timer.elapsed_seconds == 1
        assert scheduler.pending[0].when == 22

    def test_double_pause_and_resume_rejected(self, timer):
        assert timer.resume() is False
        assert timer.pause() is True
        assert timer.pause() is False
        assert timer.resume() is True

    def test_no_pause_after_expiry(self, timer, scheduler):
        scheduler.advance(240)
        assert timer.pause() is False
        assert timer.resume() is False
        assert timer.state == "EXPIRED"


class TestStop:
    """Test stopping when the round is solved."""

    def test_stop_freezes_time(self, timer, scheduler, expired):
        scheduler.advance(42)
        timer.stop()
        scheduler.advance(1000)
        assert timer.state == "STOPPED"
        assert timer.elapsed_seconds == 42
        assert expired == []

    def test_stop_is_final(self, timer):
        timer.stop()
        assert timer.pause() is False
        timer.stop()
        assert timer.state == "STOPPED"

    def test_restart_resets(self, timer, scheduler):
        scheduler.advance(30)
        timer.start()
        assert timer.elapsed_seconds == 0
        assert len(scheduler.pending) == 1


class TestScheduler:
    """Test the virtual clock underneath the timer."""

    def test_callbacks_run_in_time_order(self):
        scheduler = Scheduler()
        calls = []
        scheduler.call_later(2, lambda: calls.append("b"))
        scheduler.call_later(1, lambda: calls.append("a"))
        scheduler.call_later(2, lambda: calls.append("c"))
        assert scheduler.advance(5) == 3
        assert calls == ["a", "b", "c"]
        assert scheduler.now == 5

    def test_cancelled_call_never_runs(self):
        scheduler = Scheduler()
        calls = []
        handle = scheduler.call_later(1, lambda: calls.append("x"))
        handle.cancel()
        scheduler.advance(2)
        assert calls == []
        assert not handle.pending

    def test_cancel_all(self):
        scheduler = Scheduler()
        handles = [scheduler.call_later(i, lambda: None) for i in range(3)]
        scheduler.cancel_all()
        assert all(h.cancelled for h in handles)
        assert scheduler.next_due() is None

    def test_cancelled_entries_are_dropped(self):
        """Cancelling over and over does not grow the queue without bound."""
        scheduler = Scheduler()
        keep = scheduler.call_later(1000, lambda: None)
        for _ in range(500):
            scheduler.call_later(1, lambda: None).cancel()
        assert len(scheduler) < 40
        assert scheduler.pending == [keep]

    def test_rejects_negative_times(self):
        scheduler = Scheduler()
        with pytest.raises(ValueError):
            scheduler.call_later(-1, lambda: None)
        with pytest.raises(ValueError):
            scheduler.advance(-1)
