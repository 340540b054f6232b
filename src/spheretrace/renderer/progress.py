# renderer/progress.py
import threading
from typing import Optional

from tqdm import tqdm


class RowCounter:
    """Count of finished rows, shared by all render workers."""

    def __init__(self):
        self._lock = threading.Lock()
        self._value = 0

    def increment(self) -> None:
        with self._lock:
            self._value += 1

    @property
    def value(self) -> int:
        with self._lock:
            return self._value


class ProgressReporter:
    """
    Polls a RowCounter on a fixed interval from a daemon thread and shows it
    as a tqdm bar. Has no influence on the render itself.
    """

    def __init__(self, counter: RowCounter, total_rows: int, interval: float = 1.0):
        self.counter = counter
        self.total_rows = total_rows
        self.interval = interval
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._bar: Optional[tqdm] = None

    def start(self) -> "ProgressReporter":
        self._bar = tqdm(total=self.total_rows, unit="row", desc="Rendering", leave=True)
        self._thread = threading.Thread(target=self._run, name="progress", daemon=True)
        self._thread.start()
        return self

    def _run(self) -> None:
        while not self._stop.wait(self.interval):
            self._refresh()

    def _refresh(self) -> None:
        done = self.counter.value
        self._bar.update(done - self._bar.n)

    def stop(self) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
        if self._bar is not None:
            self._refresh()
            self._bar.close()

    def __enter__(self) -> "ProgressReporter":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
