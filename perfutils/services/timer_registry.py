"""
Named timers and the measurements they record.
"""
import functools
from contextlib import contextmanager
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, FrozenSet, Iterator, Mapping, Optional, Sequence, Union

from perfutils.core.logging import get_logger
from perfutils.services.measurement import Measurement, Scalar
from perfutils.utils.clock import Clock, process_clock

logger = get_logger(__name__)


@dataclass(frozen=True)
class TimerEntry:
    """Start timestamp of a timer, in clock milliseconds."""
    
    start_ms: float


class TimerRegistry:
    """
    Registry of named timers.
    
    Timer names should be descriptive, since they are the keys of the
    recorded measurements (e.g. "Open file: /src/project/main.py"). Several
    timers may run at once, but each running timer needs a unique name.
    
    A name is tracked in at most one of two sets:
    - active: started and not yet stopped
    - updatable: stopped through update() and still open to overwrites
      until finalize() is called
    """
    
    def __init__(self, clock: Optional[Clock] = None):
        """
        Initialize registry.
        
        Args:
            clock: Zero-argument callable returning elapsed milliseconds
                (defaults to milliseconds since process start)
        """
        self._clock = clock or process_clock
        self._measurements: Dict[str, Measurement] = {}
        self._active: Dict[str, TimerEntry] = {}
        self._updatable: Dict[str, TimerEntry] = {}
    
    @property
    def measurements(self) -> Mapping[str, Measurement]:
        """Read-only view of every recorded measurement, keyed by timer name.
        
        Records are immutable; the registry replaces them as runs are added.
        """
        return MappingProxyType(self._measurements)
    
    @property
    def active_names(self) -> FrozenSet[str]:
        return frozenset(self._active)
    
    @property
    def updatable_names(self) -> FrozenSet[str]:
        return frozenset(self._updatable)
    
    def get(self, name: str) -> Optional[Measurement]:
        return self._measurements.get(name)
    
    def start(self, names: Union[str, Sequence[str]]) -> None:
        """
        Start one or more named timers.
        
        A sequence of names starts every timer with the same captured start
        time. Starting a name that is already active is ignored with a warning.
        Starting an updatable name ends overwrites of its previous run.
        
        Args:
            names: Timer name, or sequence of timer names
        """
        now = self._clock()
        
        if isinstance(names, str):
            names = [names]
        
        for name in names:
            self._start(name, now)
    
    def _start(self, name: str, now: float) -> None:
        if name in self._active:
            logger.warning(
                f"Timer already active, recursive timers with the same name are not supported: {name}",
                extra={"timer": name}
            )
            return
        
        # A new run ends any overwrites of the previous one
        self._updatable.pop(name, None)
        self._active[name] = TimerEntry(start_ms=now)
    
    def stop(self, name: str) -> float:
        """
        Stop a timer and record its measurement.
        
        If the timer was never started, the recorded value is the clock
        reading itself, i.e. the time since process start.
        
        Args:
            name: Timer name
            
        Returns:
            The recorded duration in milliseconds
        """
        elapsed = self._clock()
        
        if name in self._active:
            elapsed -= self._active.pop(name).start_ms
        
        self._record(name, elapsed)
        logger.debug(f"Timer stopped: {name} elapsed_ms={elapsed:.2f}", extra={"timer": name})
        return elapsed
    
    def _record(self, name: str, elapsed: float) -> None:
        if name in self._measurements:
            self._measurements[name] = self._measurements[name].add(elapsed)
        else:
            self._measurements[name] = Scalar(elapsed)
    
    def update(self, name: str) -> float:
        """
        Record a measurement that later calls may overwrite.
        
        Use this to time the *last* of several events when it is not known
        in advance which event is the last one. The first call for a started
        timer records a new run and moves the name to the updatable set, so
        it no longer passes is_active(). Later calls overwrite that run,
        measured from the original start, until finalize() is called.
        
        Without a prior start there is no way to tell a first call from a
        later one, so the call is handled exactly like stop().
        
        Args:
            name: Timer name
            
        Returns:
            The recorded duration in milliseconds
        """
        if name in self._updatable:
            elapsed = self._clock() - self._updatable[name].start_ms
            
            if name in self._measurements:
                self._measurements[name] = self._measurements[name].overwrite_last(elapsed)
            else:
                self._measurements[name] = Scalar(elapsed)
            
            logger.debug(f"Timer updated: {name} elapsed_ms={elapsed:.2f}", extra={"timer": name})
            return elapsed
        
        if name in self._active:
            # Keep the start time before stop() drops the active entry
            self._updatable[name] = self._active[name]
        
        return self.stop(name)
    
    def finalize(self, name: str) -> None:
        """
        Stop tracking a timer so the next call for it starts a new run.
        
        Recorded measurements are left untouched.
        
        Args:
            name: Timer name
        """
        self._active.pop(name, None)
        self._updatable.pop(name, None)
        logger.debug(f"Timer finalized: {name}", extra={"timer": name})
    
    def is_active(self, name: str) -> bool:
        """Whether a timer has been started and not yet stopped or finalized."""
        return name in self._active
    
    @contextmanager
    def measure(self, name: str) -> Iterator[None]:
        """
        Time a block of code.
        
        Args:
            name: Timer name
        """
        self.start(name)
        try:
            yield
        finally:
            self.stop(name)
    
    def timed(self, name: Optional[str] = None) -> Callable:
        """
        Decorator that times every call of the wrapped function.
        
        Args:
            name: Timer name (defaults to the function's qualified name)
        """
        def decorator(fn: Callable) -> Callable:
            timer_name = name or fn.__qualname__
            
            @functools.wraps(fn)
            def wrapper(*args, **kwargs):
                with self.measure(timer_name):
                    return fn(*args, **kwargs)
            
            return wrapper
        
        return decorator
