"""
Tests for clocks in `care_records/domain/clock.py`.
"""

import time

from care_records.domain.clock import FixedClock, SystemClock, TimestampUnit


def test_fixed_clock_units() -> None:
    clock = FixedClock(millis=1_732_000_100_999)

    assert clock.epoch_millis() == 1_732_000_100_999
    assert clock.epoch_seconds() == 1_732_000_100


def test_system_clock_tracks_wall_time() -> None:
    clock = SystemClock()

    assert abs(clock.epoch_seconds() - time.time()) <= 2
    assert abs(clock.epoch_millis() - time.time() * 1000) <= 2000


def test_timestamp_unit_reads_matching_clock_value() -> None:
    clock = FixedClock(millis=5_250)

    assert TimestampUnit.SECONDS.read(clock) == 5
    assert TimestampUnit.MILLISECONDS.read(clock) == 5_250
