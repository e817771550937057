import threading


class Debouncer:
    """Run ``function`` once calls have been quiet for ``wait`` seconds.

    Each call replaces the arguments of the previous one; only the last call
    of a burst runs. ``timer_factory`` follows the ``threading.Timer``
    signature so tests can fire timers by hand.
    """

    def __init__(self, wait, function, timer_factory=threading.Timer):
        self.wait = wait
        self.function = function
        self._timer_factory = timer_factory
        self._timer = None
        self._lock = threading.Lock()

    def __call__(self, *args, **kwargs):
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = self._timer_factory(self.wait, self._fire, args=(args, kwargs))
            self._timer.daemon = True
            self._timer.start()

    def _fire(self, args, kwargs):
        with self._lock:
            self._timer = None
        self.function(*args, **kwargs)

    def cancel(self):
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    @property
    def waiting(self):
        return self._timer is not None
