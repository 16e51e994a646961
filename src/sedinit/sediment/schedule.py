"""Erosion-accounting periods from the [SEDTIME] section."""

import logging

from sedinit.contracts.failure import (
    AllocationFailure,
    MissingOrMalformedValue,
    TemporalOrderingViolation,
)
from sedinit.core.state import ErosionPeriod, ErosionSchedule
from sedinit.io.input_file import InputStore
from sedinit.keys import InputKey, PeriodBound, SEDTIME_SECTION
from sedinit.schemas.internal import InternalConfig
from sedinit.sediment.calendar import parse_timestamp
from sedinit.sediment.values import parse_int

logger = logging.getLogger(__name__)

ROUTINE = "parse_erosion_schedule"


def read_period_count(store: InputStore) -> int:
    """Number of declared periods.

    Raises
    ------
    MissingOrMalformedValue
        Naming TIME STEPS when missing or not an integer, naming the SEDTIME
        section when negative.
    """
    entry = InputKey.TIME_STEPS
    count = parse_int(store.lookup(entry, default=""), entry.key)
    if count < 0:
        raise MissingOrMalformedValue(SEDTIME_SECTION, f"TIME STEPS must be >= 0, got {count}")
    return count


def parse_erosion_schedule(store: InputStore, config: InternalConfig) -> ErosionSchedule:
    """Parse every declared period, checking start < end as each is read.

    Periods are checked one at a time, so a bad period stops parsing before
    the periods after it are read. Order and overlap between periods are not
    checked.

    Raises
    ------
    MissingOrMalformedValue
        Bad period count, or a missing/unparsable EROSION START/END key.
    AllocationFailure
        If the period sequences cannot be allocated.
    TemporalOrderingViolation
        If a period's end does not come strictly after its start.
    """
    count = read_period_count(store)

    try:
        starts = [None] * count
        ends = [None] * count
    except (MemoryError, OverflowError) as e:
        raise AllocationFailure(ROUTINE, f"{count} periods") from e

    formats = config.calendar.date_formats
    allow_iso = config.calendar.allow_iso

    for i in range(count):
        keys = {bound: bound.key_for(i) for bound in PeriodBound}
        raw = {
            bound: store.get(SEDTIME_SECTION, key, default="")
            for bound, key in keys.items()
        }

        starts[i] = parse_timestamp(raw[PeriodBound.START], keys[PeriodBound.START], formats, allow_iso)
        ends[i] = parse_timestamp(raw[PeriodBound.END], keys[PeriodBound.END], formats, allow_iso)

        if not starts[i] < ends[i]:
            raise TemporalOrderingViolation(
                SEDTIME_SECTION,
                f"period {i + 1}: end {ends[i]:%m/%d/%Y-%H:%M:%S} is not after start "
                f"{starts[i]:%m/%d/%Y-%H:%M:%S}",
            )
        logger.debug("Erosion period %d: %s -> %s", i + 1, starts[i], ends[i])

    schedule = ErosionSchedule(
        periods=tuple(ErosionPeriod(start=s, end=e) for s, e in zip(starts, ends))
    )
    logger.info("Erosion schedule: %d period(s)", len(schedule))
    return schedule
