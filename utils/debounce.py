import time
from typing import Any, Callable, Optional


class Debouncer:
    """
    Coalesces bursts of values.
    `submit` restarts the quiet period; `poll` hands back the last submitted value
    once `delay` seconds went by without a new submit, and only once.
    """

    def __init__(self, delay: float, clock: Callable[[], float] = time.monotonic):
        self.delay = delay
        self._clock = clock
        self._value: Any = None
        self._last_submit: Optional[float] = None

    @property
    def pending(self) -> bool:
        return self._last_submit is not None

    def submit(self, value: Any) -> None:
        self._value = value
        self._last_submit = self._clock()

    def poll(self) -> Optional[Any]:
        if self._last_submit is None:
            return None
        if self._clock() - self._last_submit < self.delay:
            return None
        value = self._value
        self.cancel()
        return value

    def cancel(self) -> None:
        self._value = None
        self._last_submit = None
