from sql_search import DelayedCall, Debouncer, delayed_scheduler


def test_without_scheduler_runs_immediately():
    calls = []
    d = Debouncer(0.1, calls.append)
    d.submit("a")
    assert calls == ["a"]
    assert not d.pending


def test_waits_for_quiet_period(scheduler):
    calls = []
    d = Debouncer(0.1, calls.append, scheduler)
    d.submit("s")
    assert d.pending
    scheduler.advance(0.05)
    assert calls == []
    scheduler.advance(0.05)
    assert calls == ["s"]
    assert not d.pending


def test_last_edit_wins(scheduler):
    calls = []
    d = Debouncer(0.1, calls.append, scheduler)
    for text in ["s", "se", "sel"]:
        d.submit(text)
        scheduler.advance(0.05)
    assert calls == []
    assert len(scheduler.armed) == 1
    scheduler.advance(0.1)
    assert calls == ["sel"]


def test_superseded_call_dropped_when_cancel_is_unavailable():
    armed = []

    def scheduler(delay, fn):
        armed.append(fn)
        return None  # nothing to cancel

    calls = []
    d = Debouncer(0.1, calls.append, scheduler)
    d.submit("old")
    d.submit("new")
    for fn in armed:
        fn()
    assert calls == ["new"]


def test_cancel_discards_pending(scheduler):
    calls = []
    d = Debouncer(0.1, calls.append, scheduler)
    d.submit("x")
    d.cancel()
    scheduler.advance(1.0)
    assert calls == []
    assert not d.pending


def test_flush_runs_pending_now(scheduler):
    calls = []
    d = Debouncer(0.1, calls.append, scheduler)
    d.flush()
    assert calls == []
    d.submit("x")
    d.flush()
    assert calls == ["x"]
    scheduler.advance(1.0)
    assert calls == ["x"]


class FakeCallLater:
    """Records AppHelper.callLater-style requests without running them."""

    def __init__(self):
        self.requests = []

    def __call__(self, delay, fn):
        self.requests.append((delay, fn))

    def run_all(self):
        for _, fn in list(self.requests):
            fn()


def test_delayed_call_is_not_invoked_on_arm():
    later = FakeCallLater()
    calls = []
    DelayedCall(2.0, lambda: calls.append("reset"), later)
    assert calls == []
    assert [d for d, _ in later.requests] == [2.0]
    later.run_all()
    assert calls == ["reset"]


def test_delayed_call_fires_once_and_honours_cancel():
    later = FakeCallLater()
    calls = []
    kept = DelayedCall(0.1, lambda: calls.append("kept"), later)
    dropped = DelayedCall(0.1, lambda: calls.append("dropped"), later)
    dropped.cancel()
    later.run_all()
    later.run_all()
    assert calls == ["kept"]
    assert kept.fired and not dropped.fired


def test_debouncer_on_delayed_scheduler_waits_for_the_timer():
    later = FakeCallLater()
    calls = []
    d = Debouncer(0.1, calls.append, delayed_scheduler(later))
    d.submit("j")
    d.submit("jo")
    assert calls == []
    assert [delay for delay, _ in later.requests] == [0.1, 0.1]
    later.run_all()
    assert calls == ["jo"]
