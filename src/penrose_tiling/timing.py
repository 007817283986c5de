# Wall clock timing of pipeline stages for verbose output.
import time


class Timing:
    """Context manager measuring how long its block took.

    str() gives the duration in the largest fitting unit: s, ms or µs.
    """

    elapsed: float = 0.0

    def __enter__(self) -> "Timing":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *exc: object) -> None:
        self.elapsed = time.perf_counter() - self._start

    def __str__(self) -> str:
        if self.elapsed >= 1:
            return f"{self.elapsed:.3g} s"
        if self.elapsed >= 1e-3:
            return f"{self.elapsed * 1e3:.3g} ms"
        return f"{int(self.elapsed * 1e6)} µs"
