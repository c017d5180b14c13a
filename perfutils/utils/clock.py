"""
Clock sources for timing operations.
"""
import time
from typing import Callable, Optional

# Zero-argument callable returning elapsed milliseconds since a fixed reference
Clock = Callable[[], float]

_PROCESS_START = time.perf_counter()


class ProcessClock:
    """Monotonic clock reporting milliseconds elapsed since process start."""
    
    def __init__(self, reference: Optional[float] = None):
        """
        Initialize clock.
        
        Args:
            reference: perf_counter() value treated as time zero
                (defaults to the value captured at import)
        """
        self.reference = _PROCESS_START if reference is None else reference
    
    def __call__(self) -> float:
        """
        Get elapsed time since the reference point.
        
        Returns:
            Elapsed time in milliseconds
        """
        return max(0.0, (time.perf_counter() - self.reference) * 1000.0)


process_clock = ProcessClock()


class Stopwatch:
    """Context manager for timing a single block against a clock."""
    
    def __init__(self, clock: Optional[Clock] = None):
        self.clock = clock or process_clock
        self.start_ms: Optional[float] = None
        self.end_ms: Optional[float] = None
    
    def __enter__(self) -> "Stopwatch":
        self.start_ms = self.clock()
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb):
        self.end_ms = self.clock()
    
    @property
    def elapsed_ms(self) -> float:
        """
        Get elapsed time in milliseconds.
        
        Returns:
            Elapsed time so far if still running, final time once exited
        """
        if self.start_ms is None:
            return 0.0
        end = self.end_ms if self.end_ms is not None else self.clock()
        return end - self.start_ms
