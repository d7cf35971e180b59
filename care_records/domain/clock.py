"""
Clock abstraction for defaulted record timestamps.

Records that omit a timestamp read it from a clock exactly once, at
construction. Passing the clock explicitly keeps tests deterministic.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from typing import Protocol


class Clock(Protocol):
    """Source of the current instant as integer epoch offsets."""

    def epoch_seconds(self) -> int: ...

    def epoch_millis(self) -> int: ...


class SystemClock:
    """Wall clock in UTC."""

    def epoch_seconds(self) -> int:
        return int(datetime.now(UTC).timestamp())

    def epoch_millis(self) -> int:
        return int(datetime.now(UTC).timestamp() * 1000)


@dataclass(frozen=True)
class FixedClock:
    """Clock pinned to a single instant, given in epoch milliseconds."""

    millis: int

    def epoch_seconds(self) -> int:
        return self.millis // 1000

    def epoch_millis(self) -> int:
        return self.millis


class TimestampUnit(str, Enum):
    """Unit a record stores its timestamp in."""

    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"

    def read(self, clock: Clock) -> int:
        if self is TimestampUnit.SECONDS:
            return clock.epoch_seconds()
        return clock.epoch_millis()


SYSTEM_CLOCK = SystemClock()
