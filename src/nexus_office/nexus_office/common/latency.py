from __future__ import annotations

import time
from typing import Callable


class SimulatedLatency:
    """Artificial delay in front of mutations so UIs can show a spinner.

    Disabled by default; tests never sleep.
    """

    def __init__(self, enabled: bool = False, *, sleep: Callable[[float], None] = time.sleep):
        self._enabled = bool(enabled)
        self._sleep = sleep

    @property
    def enabled(self) -> bool:
        return self._enabled

    def pause(self, milliseconds: int) -> None:
        if self._enabled and milliseconds > 0:
            self._sleep(milliseconds / 1000.0)
