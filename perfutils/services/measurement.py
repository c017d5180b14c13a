"""
Recorded measurement values.

A name that has been measured once holds a Scalar. The second measurement
for the same name promotes it to a Series, and it stays a Series from then on.
"""
from dataclasses import dataclass
from typing import List, Tuple, Union


@dataclass(frozen=True)
class Scalar:
    """Single recorded run."""
    
    duration: float
    
    def add(self, duration: float) -> "Series":
        """Promote to a Series holding both runs."""
        return Series((self.duration, duration))
    
    def overwrite_last(self, duration: float) -> "Scalar":
        return Scalar(duration)
    
    @property
    def values(self) -> Tuple[float, ...]:
        return (self.duration,)
    
    @property
    def last(self) -> float:
        return self.duration
    
    @property
    def runs(self) -> int:
        return 1
    
    @property
    def raw(self) -> float:
        return self.duration


@dataclass(frozen=True)
class Series:
    """Ordered runs of the same named measurement, oldest first."""
    
    durations: Tuple[float, ...] = ()
    
    def add(self, duration: float) -> "Series":
        return Series(self.durations + (duration,))
    
    def overwrite_last(self, duration: float) -> "Series":
        """Replace the current (latest) run."""
        return Series(self.durations[:-1] + (duration,))
    
    @property
    def values(self) -> Tuple[float, ...]:
        return self.durations
    
    @property
    def last(self) -> float:
        return self.durations[-1]
    
    @property
    def runs(self) -> int:
        return len(self.durations)
    
    @property
    def raw(self) -> List[float]:
        return list(self.durations)


Measurement = Union[Scalar, Series]
