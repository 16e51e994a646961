"""Setup contracts and failure types.

- Pydantic validates config correctness
- SetupError subclasses report bad model input
- Contracts validate that each setup stage kept its promises
"""

from sedinit.contracts.failure import (
    AllocationFailure,
    ContractViolation,
    InvalidOptionCombination,
    MissingOrMalformedValue,
    SetupError,
    TemporalOrderingViolation,
)
from sedinit.contracts.base import require
from sedinit.contracts.options import assert_options_consistent
from sedinit.contracts.grid import assert_fine_grid, assert_road_overlay
from sedinit.contracts.diameters import assert_diameters
from sedinit.contracts.schedule import assert_schedule

__all__ = [
    "AllocationFailure",
    "ContractViolation",
    "InvalidOptionCombination",
    "MissingOrMalformedValue",
    "SetupError",
    "TemporalOrderingViolation",
    "require",
    "assert_options_consistent",
    "assert_fine_grid",
    "assert_road_overlay",
    "assert_diameters",
    "assert_schedule",
]
