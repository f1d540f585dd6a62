import time
from typing import Optional


class Timer:
    """
    Wall clock timer for parser and highlighter operations.

    Usage:
        with Timer() as timer:
            parse_json_objects(lines, line_numbers)
        print(timer.elapsed_time)   # seconds, e.g. 0.004213
    """

    def __init__(self):
        self._start_time: float = time.perf_counter()
        self._elapsed_time: Optional[float] = None

    @property
    def elapsed_time(self) -> Optional[float]:
        """Seconds between ``start`` and ``stop``, ``None`` while running."""
        return round(self._elapsed_time, 6) if self._elapsed_time is not None else None

    @property
    def running(self) -> bool:
        return self._elapsed_time is None

    def start(self) -> None:
        self._start_time = time.perf_counter()
        self._elapsed_time = None

    def stop(self) -> float:
        self._elapsed_time = time.perf_counter() - self._start_time
        return self.elapsed_time

    def __enter__(self) -> 'Timer':
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()
