"""Tests for ProgressReporter."""

from anima.render import ProgressReporter


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_reports_each_advance():
    """Every advance emits an update with the running percentage."""
    updates = []
    reporter = ProgressReporter(4, updates.append)

    reporter.advance()
    reporter.advance(2)

    assert [u.current_frame for u in updates] == [1, 3]
    assert [u.percentage for u in updates] == [25.0, 75.0]


def test_complete_reports_100_once():
    """complete() after reaching the total does not report again."""
    updates = []
    reporter = ProgressReporter(2, updates.append)

    reporter.advance(2)
    reporter.complete()
    reporter.complete()

    assert [u.percentage for u in updates] == [100.0]


def test_complete_fills_remaining_frames():
    """complete() jumps to 100% when frames were not all counted."""
    updates = []
    reporter = ProgressReporter(10, updates.append)

    reporter.advance(3)
    reporter.complete()

    assert updates[-1].current_frame == 10
    assert updates[-1].percentage == 100.0


def test_estimates_remaining_time():
    """Remaining time extrapolates from the average time per frame."""
    clock = FakeClock()
    updates = []
    reporter = ProgressReporter(4, updates.append, clock=clock)

    clock.now = 2.0
    reporter.advance()

    assert updates[0].elapsed_ms == 2000.0
    assert updates[0].estimated_remaining_ms == 6000.0


def test_zero_frames_completes_immediately():
    """A render with nothing to do reports 100% on completion."""
    updates = []
    ProgressReporter(0, updates.append).complete()

    assert [u.percentage for u in updates] == [100.0]
