import logging
import sched
import time

logger = logging.getLogger(__name__)


class Timer:
    """Handle for a pending one-shot or repeating callback."""

    def __init__(self, callback, delay, repeat):
        self.callback = callback
        self.delay = delay
        self.repeat = repeat
        self.event = None
        self.cancelled = False

    @property
    def alive(self):
        return self.event is not None and not self.cancelled


class Scheduler:
    """Cooperative timer loop on top of `sched.scheduler`.

    Time and sleep functions are injectable so tests can advance a fake
    clock instead of sleeping.
    """

    def __init__(self, timefunc=time.monotonic, delayfunc=time.sleep):
        self._timefunc = timefunc
        self._delayfunc = delayfunc
        self._sched = sched.scheduler(timefunc, delayfunc)
        self._timers = set()

    def time(self):
        return self._timefunc()

    @property
    def active(self) -> int:
        """Number of timers that are still due to fire."""
        return len(self._timers)

    def call_later(self, delay: float, callback) -> Timer:
        return self._arm(Timer(callback, delay, repeat=False))

    def call_every(self, interval: float, callback) -> Timer:
        if interval <= 0:
            raise ValueError('interval must be positive')
        return self._arm(Timer(callback, interval, repeat=True))

    def cancel(self, timer: Timer) -> bool:
        """Cancel `timer`. Returns False if it had already fired or been cancelled."""
        if timer is None or not timer.alive:
            return False
        timer.cancelled = True
        self._timers.discard(timer)
        try:
            self._sched.cancel(timer.event)
        except ValueError:
            pass
        timer.event = None
        return True

    def _arm(self, timer: Timer) -> Timer:
        timer.event = self._sched.enter(timer.delay, 0, self._fire, (timer,))
        self._timers.add(timer)
        return timer

    def _fire(self, timer: Timer) -> None:
        if timer.cancelled:
            return
        if timer.repeat:
            # re-arm first so the callback may cancel its own timer
            timer.event = self._sched.enter(timer.delay, 0, self._fire, (timer,))
        else:
            timer.event = None
            self._timers.discard(timer)
        try:
            timer.callback()
        except Exception:
            logger.exception("Timer callback %r failed", timer.callback)

    def run_pending(self):
        """Run every callback that is due now; returns seconds until the next one."""
        return self._sched.run(blocking=False)

    def run_for(self, seconds: float) -> None:
        deadline = self._timefunc() + seconds
        while True:
            self.run_pending()
            now = self._timefunc()
            if now >= deadline:
                return
            upcoming = [event.time for event in self._sched.queue]
            next_at = min(upcoming) if upcoming else deadline
            self._delayfunc(max(0.0, min(next_at, deadline) - now))

    def run_forever(self, idle: float = 0.1) -> None:
        while True:
            wait = self.run_pending()
            self._delayfunc(idle if wait is None else wait)
