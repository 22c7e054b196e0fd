from quiz_session.timer import Countdown, due_ticks, format_time


def test_for_session_prefers_carried_value() -> None:
    assert Countdown.for_session(75, 30).remaining == 75
    assert Countdown.for_session(0, 30).remaining == 1800


def test_tick_reports_expiry_once() -> None:
    countdown = Countdown(2)

    assert countdown.tick() is False
    assert countdown.tick() is True
    assert countdown.tick() is False
    assert countdown.remaining == 0
    assert countdown.running is False


def test_zero_duration_expires_on_first_tick() -> None:
    countdown = Countdown(0)

    assert countdown.tick() is True


def test_cancel_and_resume() -> None:
    countdown = Countdown(10)
    countdown.cancel()
    countdown.tick()
    assert countdown.remaining == 10

    countdown.resume()
    countdown.tick()
    assert countdown.remaining == 9


def test_resume_after_expiry_stays_stopped() -> None:
    countdown = Countdown(1)
    countdown.tick()

    countdown.resume()

    assert countdown.running is False


def test_format_time() -> None:
    assert format_time(0) == "00:00"
    assert format_time(65) == "01:05"
    assert format_time(3725) == "62:05"
    assert format_time(-3) == "00:00"


def test_due_ticks_starts_anchor_on_first_run() -> None:
    assert due_ticks(None, 50.0, 1) == (0, 50.0)


def test_due_ticks_carries_partial_period() -> None:
    assert due_ticks(10.0, 13.7, 1) == (3, 13.0)
    assert due_ticks(10.0, 10.4, 1) == (0, 10.0)


def test_due_ticks_ignores_clock_going_backwards() -> None:
    assert due_ticks(10.0, 9.0, 1) == (0, 10.0)
