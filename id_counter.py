from threading import Lock


class IdCounter:
    """
    Thread-safe source of identity tags for `Complex` values.

    Ids are handed out with post-increment semantics: `next()` returns the
    current value and then advances, so a fresh counter issues 0, 1, 2, ...
    """

    def __init__(self, start: int = 0, *, resettable: bool = True):
        self._next = start
        self._resettable = resettable
        self._lock = Lock()

    def next(self) -> int:
        """Claim the current id and advance the counter."""
        with self._lock:
            claimed = self._next
            self._next += 1
            return claimed

    def peek(self) -> int:
        """Id the next `next()` call will return (nothing is claimed)."""
        with self._lock:
            return self._next

    def reset(self, start: int = 0) -> None:
        """
        Restart a private counter, e.g. one a test created for itself.

        Ids issued before the reset may be issued again, so the process-wide
        `DEFAULT_COUNTER` refuses to reset.
        """
        if not self._resettable:
            raise RuntimeError("this IdCounter is shared process-wide and cannot be reset")
        with self._lock:
            self._next = start

    def __repr__(self):
        return f"IdCounter(next={self.peek()})"


# process-wide default, used by every Complex built without `counter=`
DEFAULT_COUNTER = IdCounter(resettable=False)
