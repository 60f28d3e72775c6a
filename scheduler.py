"""Display-refresh frame scheduling for Paddle Duel."""

from typing import Callable, List


class FrameScheduler:
    """Queue of callbacks to run on the next display refresh.

    The host loop calls ``run_pending`` once per refresh. Callbacks
    requested while running are held for the following refresh, so a
    frame that reschedules itself runs exactly once per refresh.
    """

    def __init__(self):
        self._callbacks: List[Callable[[], None]] = []

    def request(self, callback: Callable[[], None]) -> None:
        """Run callback on the next refresh."""
        self._callbacks.append(callback)

    def run_pending(self) -> int:
        """Run the callbacks queued so far. Returns how many ran."""
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback()
        return len(callbacks)

    def clear(self) -> None:
        self._callbacks = []

    @property
    def pending(self) -> bool:
        """True if a callback is waiting for the next refresh."""
        return bool(self._callbacks)
