"""
Module: timer

Purpose:
    Process-wide exam countdown. One ExamTimer exists per process; it is
    created lazily by the first call to get_exam_timer() and shared by every
    later caller. Remaining time is computed from a fixed start and a fixed
    duration, so reading it needs no locking.

Key Classes:
    - ExamTimer: Immutable start time + duration

Key Functions:
    - get_exam_timer(): Get (creating on first use) the shared timer
    - reset_exam_timer(): Drop the shared timer

Dependencies:
    - threading (std)
    - time (std)

Used By:
    - cli: Demo driver
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_DURATION_SECONDS = 3600  # One hour


@dataclass(frozen=True)
class ExamTimer:
    """
    Countdown from a fixed start time.

    Attributes:
        duration_seconds: Total time allowed
        started_at: Clock reading when the timer started (defaults to now)
        clock: Monotonic clock returning seconds

    Example:
        >>> timer = ExamTimer(duration_seconds=60, started_at=0.0, clock=lambda: 15.5)
        >>> timer.get_remaining_seconds()
        45
    """

    duration_seconds: int = DEFAULT_DURATION_SECONDS
    started_at: Optional[float] = None
    clock: Callable[[], float] = field(default=time.monotonic, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate duration and pin the start time."""
        if self.duration_seconds <= 0:
            raise ValueError(f"duration_seconds must be positive: {self.duration_seconds}")
        if self.started_at is None:
            object.__setattr__(self, "started_at", self.clock())

    @property
    def elapsed_seconds(self) -> int:
        """Whole seconds since the timer started."""
        return int(self.clock() - self.started_at)

    def get_remaining_seconds(self) -> int:
        """Seconds left, clamped at zero."""
        return max(0, self.duration_seconds - self.elapsed_seconds)

    @property
    def is_expired(self) -> bool:
        return self.get_remaining_seconds() == 0


# ─────────────────────────────────────────────────────────────────────────────
# Process-wide Instance
# ─────────────────────────────────────────────────────────────────────────────

_timer: Optional[ExamTimer] = None
_timer_lock = threading.Lock()


def get_exam_timer(duration_seconds: int = DEFAULT_DURATION_SECONDS) -> ExamTimer:
    """
    Get the process-wide timer, creating it on first call.

    Creation is serialized so concurrent first callers all receive the same
    instance. Once created, the timer is returned as-is and
    duration_seconds is ignored.

    Args:
        duration_seconds: Duration used only when the timer is created

    Returns:
        The shared ExamTimer
    """
    global _timer
    if _timer is None:
        with _timer_lock:
            if _timer is None:
                _timer = ExamTimer(duration_seconds=duration_seconds)
                logger.info(f"Exam timer started: {duration_seconds}s")
    return _timer


def reset_exam_timer() -> None:
    """Discard the process-wide timer; the next get_exam_timer() starts a new one."""
    global _timer
    with _timer_lock:
        _timer = None
