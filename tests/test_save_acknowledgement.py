import time

from api.schemas.note import NoteField
from api.services.save_acknowledgement import SaveAcknowledgements


class ManualTimer:
    """Timer stand-in that only fires when the test says so."""

    created = []

    def __init__(self, interval, function, args=None):
        self.interval = interval
        self.function = function
        self.args = args or ()
        self.cancelled = False
        self.started = False
        self.daemon = False
        ManualTimer.created.append(self)

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        self.function(*self.args)


def setup_function():
    ManualTimer.created = []


def test_mark_sets_flag_and_schedules_reset():
    acks = SaveAcknowledgements(hold_seconds=3.0, timer_factory=ManualTimer)
    acks.mark("Warm-Up Poll", NoteField.question)

    assert acks.is_set("Warm-Up Poll", NoteField.question)
    [timer] = ManualTimer.created
    assert timer.interval == 3.0
    assert timer.started and timer.daemon

    timer.fire()
    assert not acks.is_set("Warm-Up Poll", NoteField.question)


def test_new_save_supersedes_previous_timer():
    acks = SaveAcknowledgements(timer_factory=ManualTimer)
    acks.mark("Warm-Up Poll", NoteField.question)
    acks.mark("Warm-Up Poll", NoteField.question)

    first, second = ManualTimer.created
    assert first.cancelled

    # Even if the stale timer fires, the flag stays until the latest one does
    first.fire()
    assert acks.is_set("Warm-Up Poll", NoteField.question)
    second.fire()
    assert not acks.is_set("Warm-Up Poll", NoteField.question)


def test_fields_and_strategies_are_independent():
    acks = SaveAcknowledgements(timer_factory=ManualTimer)
    acks.mark("Warm-Up Poll", NoteField.question)
    acks.mark("Self-Reflection", NoteField.reflection)

    assert not acks.is_set("Warm-Up Poll", NoteField.reflection)
    assert acks.active() == {
        ("Warm-Up Poll", NoteField.question): True,
        ("Self-Reflection", NoteField.reflection): True,
    }

    ManualTimer.created[0].fire()
    assert acks.active() == {("Self-Reflection", NoteField.reflection): True}


def test_real_timer_clears_within_window():
    acks = SaveAcknowledgements(hold_seconds=0.3)
    started = time.monotonic()
    acks.mark("Think-Pair-Share", NoteField.reflection)

    time.sleep(0.15)
    assert acks.is_set("Think-Pair-Share", NoteField.reflection)

    while acks.is_set("Think-Pair-Share", NoteField.reflection):
        assert time.monotonic() - started < 2.0
        time.sleep(0.02)
    assert time.monotonic() - started >= 0.3


def test_shutdown_cancels_pending_timers():
    acks = SaveAcknowledgements(timer_factory=ManualTimer)
    acks.mark("Warm-Up Poll", NoteField.question)
    acks.shutdown()
    assert ManualTimer.created[0].cancelled
