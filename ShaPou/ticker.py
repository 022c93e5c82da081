import logging

from constants import MAX_CATCHUP_TICKS

logger = logging.getLogger(__name__)


class TimerHandle:
    """A repeating fixed-interval timer owned by a Ticker."""

    def __init__(self, name, interval, callback):
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.name = name
        self.interval = interval
        self.callback = callback
        self.accumulator = 0.0
        self.fired = 0
        self.cancelled = False

    def cancel(self):
        if not self.cancelled:
            logger.debug("Timer '%s' cancelled after %d ticks", self.name, self.fired)
        self.cancelled = True


class Ticker:
    """
    Explicit fixed-step clock. The driver feeds it elapsed time with
    advance(); each live timer then fires once per whole interval accumulated.
    Nothing runs on its own, so the engine can be stepped synchronously in tests.
    """

    def __init__(self, max_catchup=MAX_CATCHUP_TICKS):
        self.max_catchup = max_catchup
        self.timers = []

    def schedule(self, name, interval, callback) -> TimerHandle:
        handle = TimerHandle(name, interval, callback)
        self.timers.append(handle)
        logger.debug("Timer '%s' scheduled every %.3fs", name, interval)
        return handle

    def cancel_all(self):
        for handle in self.timers:
            handle.cancel()
        self.timers = []

    def advance(self, elapsed: float):
        if elapsed < 0:
            raise ValueError("elapsed must be non-negative")

        for handle in list(self.timers):
            if handle.cancelled:
                continue
            handle.accumulator += elapsed
            fired = 0
            while handle.accumulator >= handle.interval and not handle.cancelled:
                if fired >= self.max_catchup:
                    # Drop the backlog instead of spinning through a stalled frame
                    logger.warning("Timer '%s' dropped %.3fs of backlog", handle.name, handle.accumulator)
                    handle.accumulator = 0.0
                    break
                handle.accumulator -= handle.interval
                handle.fired += 1
                fired += 1
                handle.callback(handle.interval)

        self.timers = [h for h in self.timers if not h.cancelled]
