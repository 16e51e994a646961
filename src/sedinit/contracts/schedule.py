"""Erosion schedule contract."""

from sedinit.contracts.base import require
from sedinit.core.state import ErosionSchedule


def assert_schedule(schedule: ErosionSchedule, expected_periods: int) -> None:
    """Enforce erosion schedule contract.

    Raises
    ------
    ContractViolation
        If the period count differs or any period is not strictly ordered.
    """
    require(
        len(schedule) == expected_periods,
        f"Schedule contract violated: got {len(schedule)} periods, expected {expected_periods}"
    )
    for i, period in enumerate(schedule.periods):
        require(
            period.start < period.end,
            f"Schedule contract violated: period {i + 1} start is not before end"
        )
